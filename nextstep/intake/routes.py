from typing import List
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from nextstep.core.database import get_db
from nextstep.core.dependency import get_current_profile, require_admin
from nextstep.intake.schemas import (
    AnswerMap,
    AnswersSubmit,
    QuestionCreate,
    QuestionResponse,
    UserAnswersResponse,
)
from nextstep.intake.service import (
    create_question,
    get_user_answers,
    list_active_questions,
    list_all_questions,
    list_answers_by_user,
    submit_answers,
)
from nextstep.profiles.models import Profile
from nextstep.profiles.service import list_profiles

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])
admin_router = APIRouter(prefix="/admin", tags=["Admin"])
logger = logging.getLogger(__name__)


@router.get(
    "/questions",
    response_model=List[QuestionResponse],
    summary="List active intake questions",
    responses={
        200: {"description": "Questions retrieved successfully."},
        401: {"description": "Unauthorized."},
        500: {"description": "Failed to retrieve questions."},
    },
)
def read_active_questions_route(
    db: Session = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> List[QuestionResponse]:
    try:
        return list_active_questions(db)
    except Exception as e:
        logger.error(f"Failed to fetch questions for profile {profile.id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve questions")


@router.get(
    "/answers",
    response_model=AnswerMap,
    summary="Get the caller's saved answers",
    responses={
        200: {"description": "Answers retrieved successfully."},
        401: {"description": "Unauthorized."},
        500: {"description": "Failed to retrieve answers."},
    },
)
def read_answers_route(
    db: Session = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> AnswerMap:
    try:
        return AnswerMap(answers=get_user_answers(db, profile.id))
    except Exception as e:
        logger.error(f"Failed to fetch answers for profile {profile.id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve answers")


@router.put(
    "/answers",
    response_model=AnswerMap,
    summary="Save intake answers",
    description="Replaces every saved answer with the non-empty ones submitted.",
    responses={
        200: {"description": "Answers saved."},
        400: {"description": "No question answered."},
        401: {"description": "Unauthorized."},
        500: {"description": "Failed to save answers."},
    },
)
def submit_answers_route(
    body: AnswersSubmit,
    db: Session = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> AnswerMap:
    try:
        rows = submit_answers(db, profile.id, body.answers)
        return AnswerMap(answers={row.question_id: row.answer_text for row in rows})
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to save answers for profile {profile.id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to save answers.")


@admin_router.get(
    "/questions",
    response_model=List[QuestionResponse],
    summary="List all intake questions",
    responses={
        200: {"description": "Questions retrieved successfully."},
        403: {"description": "Not an admin."},
        500: {"description": "Failed to retrieve questions."},
    },
)
def list_all_questions_route(
    db: Session = Depends(get_db),
    admin: Profile = Depends(require_admin),
) -> List[QuestionResponse]:
    try:
        return list_all_questions(db)
    except Exception as e:
        logger.error(f"Failed to list questions: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve questions")


@admin_router.post(
    "/questions",
    response_model=QuestionResponse,
    summary="Create an intake question",
    description="New questions are appended after the current last one.",
    responses={
        200: {"description": "Question created successfully."},
        400: {"description": "Missing question text."},
        403: {"description": "Not an admin."},
        500: {"description": "Failed to create question."},
    },
)
def create_question_route(
    question: QuestionCreate,
    db: Session = Depends(get_db),
    admin: Profile = Depends(require_admin),
) -> QuestionResponse:
    try:
        return create_question(db, question)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to create question: {e}")
        raise HTTPException(status_code=500, detail="Failed to create question.")


@admin_router.get(
    "/answers",
    response_model=UserAnswersResponse,
    summary="List intake answers per user",
    responses={
        200: {"description": "Answers retrieved successfully."},
        403: {"description": "Not an admin."},
        500: {"description": "Failed to retrieve answers."},
    },
)
def list_user_answers_route(
    db: Session = Depends(get_db),
    admin: Profile = Depends(require_admin),
) -> UserAnswersResponse:
    try:
        profile_ids = [p.id for p in list_profiles(db)]
        return UserAnswersResponse(answers=list_answers_by_user(db, profile_ids))
    except Exception as e:
        logger.error(f"Failed to list answers: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve answers")
