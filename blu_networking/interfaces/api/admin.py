"""Admin routes - board-level listings and aggregates, role changes."""

from typing import List

from fastapi import APIRouter, Depends

from blu_networking.application.services.event_service import list_admin_events
from blu_networking.application.services.member_service import set_user_level
from blu_networking.application.services.spotlight_service import list_spotlights
from blu_networking.application.services.stats_service import get_admin_stats
from blu_networking.domain.models.user import User
from blu_networking.domain.repositories.event_repository import EventRepository
from blu_networking.domain.repositories.lead_repository import LeadRepository
from blu_networking.domain.repositories.spotlight_repository import SpotlightRepository
from blu_networking.domain.repositories.user_repository import UserRepository
from blu_networking.domain.schemas.auth import UserLevelUpdate, UserRead
from blu_networking.domain.schemas.event import AdminEventRead
from blu_networking.domain.schemas.spotlight import SpotlightRead
from blu_networking.domain.schemas.stats import AdminStats
from blu_networking.interfaces.api.deps import require_board_member, require_executive_board
from blu_networking.interfaces.deps import (
    get_event_repository,
    get_lead_repository,
    get_spotlight_repository,
    get_user_repository,
)

router = APIRouter(prefix="/api/admin", tags=["Admin"])


@router.get("/users", response_model=List[UserRead])
def admin_users(
    repo: UserRepository = Depends(get_user_repository),
    user: User = Depends(require_board_member),
):
    return [UserRead.model_validate(u) for u in repo.list_all()]


@router.get("/events", response_model=List[AdminEventRead])
def admin_events(
    repo: EventRepository = Depends(get_event_repository),
    user: User = Depends(require_board_member),
):
    return list_admin_events(repo)


@router.get("/spotlights", response_model=List[SpotlightRead])
def admin_spotlights(
    repo: SpotlightRepository = Depends(get_spotlight_repository),
    user: User = Depends(require_board_member),
):
    return [SpotlightRead.model_validate(s) for s in list_spotlights(repo)]


@router.get("/stats", response_model=AdminStats)
def admin_stats(
    user_repo: UserRepository = Depends(get_user_repository),
    event_repo: EventRepository = Depends(get_event_repository),
    lead_repo: LeadRepository = Depends(get_lead_repository),
    user: User = Depends(require_board_member),
):
    return get_admin_stats(user_repo, event_repo, lead_repo)


@router.patch("/users/{user_id}/level", response_model=UserRead)
def patch_user_level(
    user_id: int,
    body: UserLevelUpdate,
    repo: UserRepository = Depends(get_user_repository),
    user: User = Depends(require_executive_board),
):
    return UserRead.model_validate(set_user_level(repo, user_id, body.user_level))
