from typing import Optional
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from nextstep.auth.schemas import Identity
from nextstep.auth.service import get_optional_identity
from nextstep.chatbot.schemas import ChatRequest, ChatResponse
from nextstep.chatbot.service import ChatService
from nextstep.core.dependency import get_chat_service

router = APIRouter(prefix="/api", tags=["Chatbot"])
logger = logging.getLogger(__name__)


@router.post(
    "/chatbot",
    response_model=ChatResponse,
    summary="Ask the site assistant",
    description="Send the conversation so far, receive the assistant's next message.",
    responses={
        200: {"description": "Assistant reply."},
        400: {"description": "Messages array is required."},
        500: {"description": "Completion provider failed."},
    },
)
async def chatbot_route(
    request: Request,
    identity: Optional[Identity] = Depends(get_optional_identity),
    chat: ChatService = Depends(get_chat_service),
):
    try:
        payload = await request.json()
    except ValueError:
        return JSONResponse(status_code=400, content={"error": "Messages array is required"})

    messages = payload.get("messages") if isinstance(payload, dict) else None
    if not isinstance(messages, list):
        return JSONResponse(status_code=400, content={"error": "Messages array is required"})
    try:
        body = ChatRequest(messages=messages)
    except ValidationError as e:
        return JSONResponse(status_code=400, content={"error": "Invalid messages", "details": str(e)})

    try:
        message = await run_in_threadpool(chat.reply, body.messages)
    except Exception as e:
        logger.error(f"Chatbot completion failed for {identity.id if identity else 'anonymous'}: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": str(e) or "Failed to generate response", "details": repr(e)},
        )
    return ChatResponse(message=message)
