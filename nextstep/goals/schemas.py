from datetime import date, datetime
from typing import Optional, List
from uuid import UUID
from pydantic import BaseModel


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True


class GoalResponse(BaseSchema):
    id: UUID
    user_id: UUID
    title: str
    description: Optional[str] = None
    target_date: Optional[date] = None
    status: str
    created_at: Optional[datetime] = None


class GoalCreate(BaseSchema):
    title: str
    description: Optional[str] = None
    target_date: Optional[date] = None


class StepResponse(BaseSchema):
    id: UUID
    goal_id: UUID
    title: str
    description: Optional[str] = None
    due_date: Optional[date] = None
    status: str
    order_index: int
    completed_at: Optional[datetime] = None


class StepCreate(BaseSchema):
    title: str
    description: Optional[str] = None
    due_date: Optional[date] = None


class StepStatusToggle(BaseSchema):
    current_status: str


class GoalProgressResponse(BaseSchema):
    goal_id: UUID
    steps: List[StepResponse]
    completed_steps: int
    total_steps: int
    progress: float
