"""Analytics routes - per-member trends over a trailing period."""

from typing import List, Literal

from fastapi import APIRouter, Depends, Query

from blu_networking.application.services import stats_service
from blu_networking.domain.models.user import User
from blu_networking.domain.repositories.event_repository import EventRepository
from blu_networking.domain.repositories.lead_repository import LeadRepository
from blu_networking.domain.repositories.message_repository import MessageRepository
from blu_networking.domain.schemas.stats import AnalyticsStats, NamedCount, TopMember, TrendPoint
from blu_networking.interfaces.api.deps import get_current_user
from blu_networking.interfaces.deps import get_event_repository, get_lead_repository, get_message_repository

router = APIRouter(prefix="/api/analytics", tags=["Analytics"])

Period = Literal["monthly", "quarterly", "yearly"]


@router.get("/stats", response_model=AnalyticsStats)
def analytics_stats(
    period: Period = Query("monthly"),
    lead_repo: LeadRepository = Depends(get_lead_repository),
    event_repo: EventRepository = Depends(get_event_repository),
    message_repo: MessageRepository = Depends(get_message_repository),
    user: User = Depends(get_current_user),
):
    return stats_service.get_analytics_stats(lead_repo, event_repo, message_repo, user, period)


@router.get("/lead-types", response_model=List[NamedCount])
def lead_types(
    period: Period = Query("monthly"),
    repo: LeadRepository = Depends(get_lead_repository),
    user: User = Depends(get_current_user),
):
    return stats_service.get_lead_types(repo, user, period)


@router.get("/lead-statuses", response_model=List[NamedCount])
def lead_statuses(
    period: Period = Query("monthly"),
    repo: LeadRepository = Depends(get_lead_repository),
    user: User = Depends(get_current_user),
):
    return stats_service.get_lead_statuses(repo, user, period)


@router.get("/trends", response_model=List[TrendPoint])
def trends(
    period: Period = Query("monthly"),
    lead_repo: LeadRepository = Depends(get_lead_repository),
    event_repo: EventRepository = Depends(get_event_repository),
    message_repo: MessageRepository = Depends(get_message_repository),
    user: User = Depends(get_current_user),
):
    # Always the trailing six calendar months; period is accepted for client compatibility
    return stats_service.get_trends(lead_repo, event_repo, message_repo, user)


@router.get("/top-members", response_model=List[TopMember])
def top_members(
    period: Period = Query("monthly"),
    repo: LeadRepository = Depends(get_lead_repository),
    user: User = Depends(get_current_user),
):
    return stats_service.get_top_members(repo, period)
