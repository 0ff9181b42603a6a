import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Boolean, Integer, DateTime, ForeignKey, Uuid
from nextstep.core.database import Base


class IntakeQuestion(Base):
    __tablename__ = "intake_questions"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    question_text = Column(String, nullable=False)
    helper_text = Column(String, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    order_index = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))


class Answer(Base):
    __tablename__ = "user_question_answers"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("profiles.id"), index=True, nullable=False)
    question_id = Column(Uuid(as_uuid=True), ForeignKey("intake_questions.id"), nullable=False)
    answer_text = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
