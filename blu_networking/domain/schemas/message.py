"""Pydantic schemas for member messages."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blu_networking.domain.schemas.common import CamelModel


class MessageCreate(CamelModel):
    to_user_id: int
    subject: str = Field(min_length=1)
    message: str = Field(min_length=1)


class MessageRead(CamelModel):
    id: int
    from_user_id: int
    to_user_id: int
    chapter_id: int
    subject: str
    message: str
    is_read: bool
    sent_at: Optional[datetime] = None
