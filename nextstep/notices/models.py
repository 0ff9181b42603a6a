import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Uuid
from nextstep.core.database import Base


class Notice(Base):
    __tablename__ = "notices"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("profiles.id"), index=True, nullable=False)  # recipient
    admin_id = Column(Uuid(as_uuid=True), ForeignKey("profiles.id"), nullable=False)  # sender

    title = Column(String, nullable=False)
    message = Column(String, nullable=False)
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
