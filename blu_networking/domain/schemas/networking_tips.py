"""Pydantic schemas for AI networking tips."""

from typing import List, Optional

from pydantic import BaseModel, Field

from blu_networking.domain.schemas.common import CamelModel


class NetworkingTipsRequest(CamelModel):
    """Optional overrides of the caller's profile plus goal and event type."""
    industry: Optional[str] = None
    expertise: Optional[str] = None
    company: Optional[str] = None
    title: Optional[str] = None
    goal: Optional[str] = None
    event_type: Optional[str] = None


class NetworkingProfile(BaseModel):
    full_name: str
    industry: Optional[str] = None
    expertise: Optional[str] = None
    company: Optional[str] = None
    title: Optional[str] = None
    goal: Optional[str] = None
    event_type: Optional[str] = None


class NetworkingTip(BaseModel):
    category: str = Field(min_length=1)  # conversation_starter, follow_up, industry_specific, ...
    tip: str = Field(min_length=1)
    reasoning: Optional[str] = None


class NetworkingTipsResponse(BaseModel):
    tips: List[NetworkingTip] = Field(min_length=1)
    summary: str
