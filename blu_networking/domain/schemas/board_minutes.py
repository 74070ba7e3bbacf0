"""Pydantic schemas for board meeting minutes."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import Field, field_validator

from blu_networking.domain.schemas.common import CamelModel


class BoardMinutesCreate(CamelModel):
    title: str = Field(min_length=1)
    meeting_date: date
    attendees: List[str] = Field(min_length=1)
    agenda: Optional[str] = None
    minutes: str = Field(min_length=1)
    action_items: List[str] = Field(default_factory=list)
    next_meeting_date: Optional[date] = None
    is_published: bool = False
    chapter_id: Optional[int] = None  # defaults to the author's chapter


class BoardMinutesUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1)
    meeting_date: Optional[date] = None
    attendees: Optional[List[str]] = Field(default=None, min_length=1)
    agenda: Optional[str] = None
    minutes: Optional[str] = Field(default=None, min_length=1)
    action_items: Optional[List[str]] = None
    next_meeting_date: Optional[date] = None
    is_published: Optional[bool] = None

    @field_validator("title", "meeting_date", "attendees", "minutes", "is_published")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value

    @field_validator("action_items")
    @classmethod
    def null_clears_action_items(cls, value):
        return [] if value is None else value


class BoardMinutesRead(CamelModel):
    id: int
    title: str
    meeting_date: date
    attendees: List[str]
    agenda: Optional[str] = None
    minutes: str
    action_items: List[str] = Field(default_factory=list)
    next_meeting_date: Optional[date] = None
    is_published: bool
    created_by_id: int
    chapter_id: int
    created_at: Optional[datetime] = None

    @field_validator("action_items", mode="before")
    @classmethod
    def default_action_items(cls, value):
        return [] if value is None else value
