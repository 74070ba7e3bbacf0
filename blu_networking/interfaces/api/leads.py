"""Lead, goal and dashboard stats routes."""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from blu_networking.application.services.lead_service import (
    create_goal,
    create_lead,
    get_current_goal,
    list_leads,
)
from blu_networking.application.services.stats_service import get_member_stats
from blu_networking.domain.models.user import User
from blu_networking.domain.repositories.event_repository import EventRepository
from blu_networking.domain.repositories.lead_repository import GoalRepository, LeadRepository
from blu_networking.domain.repositories.message_repository import MessageRepository
from blu_networking.domain.schemas.lead import GoalCreate, GoalRead, LeadCreate, LeadRead
from blu_networking.domain.schemas.stats import MemberStats
from blu_networking.interfaces.api.deps import get_current_user
from blu_networking.interfaces.deps import (
    get_event_repository,
    get_goal_repository,
    get_lead_repository,
    get_message_repository,
)

router = APIRouter(prefix="/api", tags=["Leads"])


@router.get("/leads", response_model=List[LeadRead])
def get_leads(
    repo: LeadRepository = Depends(get_lead_repository),
    user: User = Depends(get_current_user),
):
    return [LeadRead.model_validate(lead) for lead in list_leads(repo, user)]


@router.post("/leads", response_model=LeadRead, status_code=status.HTTP_201_CREATED)
def post_lead(
    body: LeadCreate,
    repo: LeadRepository = Depends(get_lead_repository),
    user: User = Depends(get_current_user),
):
    return LeadRead.model_validate(create_lead(repo, user, body))


@router.get("/goals", response_model=Optional[GoalRead])
def get_goals(
    repo: GoalRepository = Depends(get_goal_repository),
    user: User = Depends(get_current_user),
):
    goal = get_current_goal(repo, user)
    return GoalRead.model_validate(goal) if goal else None


@router.post("/goals", response_model=GoalRead, status_code=status.HTTP_201_CREATED)
def post_goal(
    body: GoalCreate,
    repo: GoalRepository = Depends(get_goal_repository),
    user: User = Depends(get_current_user),
):
    return GoalRead.model_validate(create_goal(repo, user, body))


@router.get("/stats", response_model=MemberStats)
def get_stats(
    lead_repo: LeadRepository = Depends(get_lead_repository),
    event_repo: EventRepository = Depends(get_event_repository),
    message_repo: MessageRepository = Depends(get_message_repository),
    user: User = Depends(get_current_user),
):
    return get_member_stats(lead_repo, event_repo, message_repo, user)
