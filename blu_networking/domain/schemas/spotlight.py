"""Pydantic schemas for Member Spotlights."""

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from blu_networking.domain.schemas.auth import UserRead
from blu_networking.domain.schemas.common import CamelModel


class SpotlightCreate(CamelModel):
    user_id: int
    description: str = Field(min_length=1)
    achievements: Optional[str] = None
    active: bool = True
    featured_until: Optional[date] = None


class SpotlightRead(CamelModel):
    id: int
    user_id: int
    description: str
    achievements: Optional[str] = None
    active: bool
    created_at: Optional[datetime] = None
    featured_until: Optional[date] = None
    user: Optional[UserRead] = None
