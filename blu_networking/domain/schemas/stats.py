"""Pydantic schemas for dashboard, admin and analytics aggregates."""

from typing import Optional

from blu_networking.domain.schemas.common import CamelModel


class MemberStats(CamelModel):
    connections: int
    leads_exchanged: int
    events_attended: int
    lead_value: int


class AdminStats(CamelModel):
    total_members: int
    active_events: int
    total_leads: int
    avg_lead_value: float


class AnalyticsStats(CamelModel):
    total_leads: int
    lead_change: int
    conversion_rate: int
    conversion_rate_change: int
    events_attended: int
    events_change: int
    connections: int
    connections_change: int


class NamedCount(CamelModel):
    name: str
    value: int


class TrendPoint(CamelModel):
    month: str
    leads: int
    connections: int
    events: int


class TopMember(CamelModel):
    name: str
    leads_generated: int
    lead_value: int
    avatar_url: Optional[str] = None
