from datetime import datetime
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True


class NoticeResponse(BaseSchema):
    id: UUID
    user_id: UUID
    admin_id: UUID
    title: str
    message: str
    is_read: bool
    created_at: Optional[datetime] = None


class NoticeCreate(BaseSchema):
    user_id: UUID
    title: str
    message: str


class NoticeFeed(BaseSchema):
    notices: List[NoticeResponse]
    unread_count: int
