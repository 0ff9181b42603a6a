from datetime import datetime
from typing import Literal, Optional
from uuid import UUID
from pydantic import BaseModel


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True


class ProfileOut(BaseSchema):
    id: UUID
    user_id: str
    full_name: Optional[str] = None
    role: str
    created_at: Optional[datetime] = None


class RoleToggleRequest(BaseSchema):
    current_role: Literal["user", "admin"]
    confirm: bool = False
