"""Pydantic schemas for Events and registrations."""

from datetime import date, datetime, time
from typing import Optional

from pydantic import Field, model_validator

from blu_networking.domain.schemas.common import CamelModel


class EventBase(CamelModel):
    title: str = Field(min_length=1)
    description: str
    date: date
    start_time: time
    end_time: time
    location: str = Field(min_length=1)
    capacity: Optional[int] = Field(default=None, ge=1)


class EventCreate(EventBase):
    @model_validator(mode="after")
    def check_times(self):
        if self.end_time < self.start_time:
            raise ValueError("endTime must not be before startTime")
        return self


class EventRead(EventBase):
    id: int
    created_by_id: Optional[int] = None
    created_at: Optional[datetime] = None


class EventWithStatus(EventRead):
    """Event as seen by the calling member."""
    is_registered: bool = False
    attended: bool = False


class EventDetail(EventRead):
    registration_count: int = 0


class AdminEventRead(EventRead):
    attendee_count: int = 0


class RegistrationCreate(CamelModel):
    event_id: int
    user_id: Optional[int] = None  # defaults to the caller


class RegistrationRead(CamelModel):
    id: int
    event_id: int
    user_id: int
    registered_at: Optional[datetime] = None
    attended: bool
    checked_in_at: Optional[datetime] = None
