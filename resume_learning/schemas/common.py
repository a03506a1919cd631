"""Shared schema bits: camelCase wire models and the response envelope."""
from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field
from pydantic.alias_generators import to_camel


def _as_utc(value: datetime) -> datetime:
    # SQLite hands stored timestamps back naive; everything is written in UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Timestamps always go out with a UTC offset
UtcDateTime = Annotated[datetime, AfterValidator(_as_utc)]

# Request integers must fit the store's INTEGER columns
Int32 = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]


class CamelModel(BaseModel):
    """snake_case in Python, camelCase on the wire."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class Envelope(CamelModel):
    success: bool = True
    message: str | None = None


class ErrorResponse(Envelope):
    success: bool = False


class HealthData(CamelModel):
    status: str
    time: UtcDateTime


class HealthResponse(Envelope):
    data: HealthData
