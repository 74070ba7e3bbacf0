"""Pydantic schemas for Leads and goals."""

from datetime import date, datetime
from typing import Optional

from pydantic import Field, model_validator

from blu_networking.domain.schemas.common import CamelModel


class LeadCreate(CamelModel):
    name: str = Field(min_length=1)
    company: str = Field(min_length=1)
    email: Optional[str] = None
    phone_number: Optional[str] = None
    notes: Optional[str] = None
    type: str = Field(min_length=1)
    status: str = Field(min_length=1)
    value: Optional[int] = Field(default=None, ge=0)
    follow_up_date: Optional[date] = None


class LeadRead(LeadCreate):
    id: int
    user_id: int
    created_at: Optional[datetime] = None


class GoalCreate(CamelModel):
    connections_goal: int = Field(default=0, ge=0)
    connections_achieved: int = Field(default=0, ge=0)
    leads_goal: int = Field(default=0, ge=0)
    leads_achieved: int = Field(default=0, ge=0)
    events_goal: int = Field(default=0, ge=0)
    events_achieved: int = Field(default=0, ge=0)
    follow_ups_goal: int = Field(default=0, ge=0)
    follow_ups_achieved: int = Field(default=0, ge=0)
    period: str = Field(min_length=1)
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class GoalRead(GoalCreate):
    id: int
    user_id: int
