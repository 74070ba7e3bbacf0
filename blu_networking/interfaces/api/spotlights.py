"""Member spotlight routes."""

from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, status

from blu_networking.application.services.email_service import send_spotlight_notification_email
from blu_networking.application.services.spotlight_service import create_spotlight, get_active_spotlight
from blu_networking.domain.models.user import User
from blu_networking.domain.repositories.spotlight_repository import SpotlightRepository
from blu_networking.domain.repositories.user_repository import UserRepository
from blu_networking.domain.schemas.spotlight import SpotlightCreate, SpotlightRead
from blu_networking.interfaces.api.deps import get_current_user, require_board_member
from blu_networking.interfaces.deps import get_spotlight_repository, get_user_repository

router = APIRouter(prefix="/api", tags=["Spotlights"])


@router.get("/spotlight", response_model=Optional[SpotlightRead])
def get_spotlight(
    repo: SpotlightRepository = Depends(get_spotlight_repository),
    user: User = Depends(get_current_user),
):
    spotlight = get_active_spotlight(repo)
    return SpotlightRead.model_validate(spotlight) if spotlight else None


@router.post("/member-spotlights", response_model=SpotlightRead, status_code=status.HTTP_201_CREATED)
def post_spotlight(
    body: SpotlightCreate,
    background_tasks: BackgroundTasks,
    repo: SpotlightRepository = Depends(get_spotlight_repository),
    user_repo: UserRepository = Depends(get_user_repository),
    user: User = Depends(require_board_member),
):
    spotlight = create_spotlight(repo, user_repo, body)
    featured = spotlight.user
    # Notifications go to the featured member's chapter only
    if featured.chapter_id is not None:
        background_tasks.add_task(
            send_spotlight_notification_email,
            user_repo.emails_by_chapter(featured.chapter_id),
            featured.full_name,
            spotlight.achievements or spotlight.description,
        )
    return SpotlightRead.model_validate(spotlight)
