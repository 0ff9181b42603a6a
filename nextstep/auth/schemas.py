from pydantic import BaseModel
from typing import Optional

from nextstep.profiles.schemas import ProfileOut


class Identity(BaseModel):
    id: str
    email: Optional[str] = None
    name: Optional[str] = None


class MeResponse(BaseModel):
    identity: Identity
    profile: ProfileOut
