import logging
from typing import Dict, List
from uuid import UUID, uuid4

from fastapi import HTTPException
from sqlalchemy.orm import Session

from nextstep.core.ordering import next_order_index
from nextstep.intake.models import Answer, IntakeQuestion
from nextstep.intake.schemas import QuestionCreate, UserAnswer

logger = logging.getLogger(__name__)


# Questions
def list_active_questions(db: Session) -> List[IntakeQuestion]:
    return (
        db.query(IntakeQuestion)
        .filter(IntakeQuestion.is_active.is_(True))
        .order_by(IntakeQuestion.created_at.asc())
        .all()
    )

def list_all_questions(db: Session) -> List[IntakeQuestion]:
    return db.query(IntakeQuestion).order_by(IntakeQuestion.order_index.asc()).all()

def create_question(db: Session, question: QuestionCreate) -> IntakeQuestion:
    text = question.question_text.strip()
    if not text:
        raise HTTPException(status_code=400, detail="Question text is required.")

    new_question = IntakeQuestion(
        id=uuid4(),
        question_text=text,
        helper_text=(question.helper_text or "").strip() or None,
        order_index=next_order_index(db, IntakeQuestion.order_index),
    )
    db.add(new_question)
    db.commit()
    db.refresh(new_question)
    return new_question


# Answers
def get_user_answers(db: Session, profile_id: UUID) -> Dict[UUID, str]:
    rows = db.query(Answer).filter(Answer.user_id == profile_id).all()
    return {row.question_id: row.answer_text or "" for row in rows}

def submit_answers(db: Session, profile_id: UUID, answers: Dict[UUID, str]) -> List[Answer]:
    """
    Replaces the profile's whole answer set with the non-empty entries of ``answers``.

    Args:
        db (Session): DB session.
        profile_id (UUID): Owner of the answers.
        answers (dict): question_id -> answer text, empty entries allowed.

    Returns:
        List[Answer]: The stored answers.

    Raises:
        HTTPException: If every entry is blank. Storage is not touched.
    """
    kept = {qid: text.strip() for qid, text in answers.items() if text and text.strip()}
    if not kept:
        raise HTTPException(status_code=400, detail="Please answer at least one question.")

    rows = [
        Answer(id=uuid4(), user_id=profile_id, question_id=qid, answer_text=text)
        for qid, text in kept.items()
    ]
    # delete and insert share one transaction
    try:
        db.query(Answer).filter(Answer.user_id == profile_id).delete(synchronize_session=False)
        db.add_all(rows)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("Replaced answers for profile %s (%d saved)", profile_id, len(rows))
    return rows

def list_answers_by_user(db: Session, profile_ids: List[UUID]) -> Dict[UUID, List[UserAnswer]]:
    """Answers grouped by profile; profiles without answers are left out."""
    texts = {q.id: q.question_text for q in db.query(IntakeQuestion).all()}
    grouped: Dict[UUID, List[UserAnswer]] = {}
    for profile_id in profile_ids:
        rows = db.query(Answer).filter(Answer.user_id == profile_id).all()
        if not rows:
            continue
        grouped[profile_id] = [
            UserAnswer(
                question_id=row.question_id,
                answer_text=row.answer_text,
                question_text=texts.get(row.question_id, "Unknown question"),
            )
            for row in rows
        ]
    return grouped
