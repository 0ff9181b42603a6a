from __future__ import annotations

import logging
from typing import Any, List, Optional

from openai import OpenAI

from nextstep.chatbot.prompts import FALLBACK_MESSAGE, MAX_TOKENS, SYSTEM_PROMPT, TEMPERATURE
from nextstep.chatbot.schemas import ChatMessage
from nextstep.core.config import OPENAI_API_KEY, OPENAI_BASE_URL, OPENAI_CHAT_MODEL

logger = logging.getLogger(__name__)


class ChatService:
    """Facade around the chat completion endpoint for the site assistant."""

    def __init__(self, client: Optional[OpenAI] = None, model: str = OPENAI_CHAT_MODEL):
        self.client = client or OpenAI(api_key=OPENAI_API_KEY, base_url=OPENAI_BASE_URL)
        self.model = model

    @staticmethod
    def build_messages(messages: List[ChatMessage]) -> List[dict[str, Any]]:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            *({"role": m.role, "content": m.content} for m in messages),
        ]

    def reply(self, messages: List[ChatMessage]) -> str:
        """Runs one completion over the conversation and returns the assistant text."""
        resp = self.client.chat.completions.create(
            model=self.model,
            messages=self.build_messages(messages),
            temperature=TEMPERATURE,
            max_tokens=MAX_TOKENS,
        )
        content = resp.choices[0].message.content if resp.choices else None
        if not content:
            logger.info("Completion returned no content, using fallback message")
            return FALLBACK_MESSAGE
        return content
