"""Pydantic schemas for login."""
from resume_learning.schemas.common import CamelModel, Envelope, UtcDateTime


class LoginRequest(CamelModel):
    # null decodes like a missing field; the service rejects blank ids
    user_id: str | None = ""
    name: str | None = ""


class UserOut(CamelModel):
    id: int
    user_id: str
    name: str
    created_at: UtcDateTime
    updated_at: UtcDateTime


class LoginResponse(Envelope):
    data: UserOut
    user: UserOut | None = None  # same record, under the key older mobile clients read
