import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Timezone-aware current UTC time; all persisted timestamps use it"""
    return datetime.now(timezone.utc)


def timestamp_field(**kwargs: Any) -> Any:
    return Field(default_factory=utc_now, sa_type=DateTime(timezone=True), **kwargs)


class BaseModel(SQLModel):
    """Base class for all persisted domain entities"""
    pass
