import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, Uuid
from nextstep.core.database import Base

ROLE_USER = "user"
ROLE_ADMIN = "admin"


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(String, unique=True, index=True, nullable=False)  # identity provider subject
    full_name = Column(String, nullable=True)
    role = Column(String, nullable=False, default=ROLE_USER)  # "user" or "admin"
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
