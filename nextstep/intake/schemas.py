from typing import Dict, List, Optional
from uuid import UUID
from pydantic import BaseModel


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True


class QuestionResponse(BaseSchema):
    id: UUID
    question_text: str
    helper_text: Optional[str] = None
    is_active: bool
    order_index: int


class QuestionCreate(BaseSchema):
    question_text: str
    helper_text: Optional[str] = None


class AnswersSubmit(BaseSchema):
    answers: Dict[UUID, str]


class AnswerMap(BaseSchema):
    answers: Dict[UUID, str]


class UserAnswer(BaseSchema):
    question_id: UUID
    answer_text: str
    question_text: str


class UserAnswersResponse(BaseSchema):
    answers: Dict[UUID, List[UserAnswer]]
