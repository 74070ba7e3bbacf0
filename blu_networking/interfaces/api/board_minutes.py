"""Board meeting minutes routes."""

from typing import List

from fastapi import APIRouter, BackgroundTasks, Depends, status

from blu_networking.application.services import board_minutes_service
from blu_networking.application.services.email_service import send_board_minutes_email
from blu_networking.domain.models.board_meeting_minutes import BoardMeetingMinutes
from blu_networking.domain.models.user import User
from blu_networking.domain.repositories.board_minutes_repository import BoardMinutesRepository
from blu_networking.domain.repositories.user_repository import UserRepository
from blu_networking.domain.schemas.board_minutes import BoardMinutesCreate, BoardMinutesRead, BoardMinutesUpdate
from blu_networking.interfaces.api.deps import get_current_user, require_board_member
from blu_networking.interfaces.deps import get_board_minutes_repository, get_user_repository

router = APIRouter(prefix="/api/board-minutes", tags=["Board Minutes"])


def _notify_published(
    background_tasks: BackgroundTasks, user_repo: UserRepository, minutes: BoardMeetingMinutes
) -> None:
    background_tasks.add_task(
        send_board_minutes_email,
        user_repo.emails_by_chapter(minutes.chapter_id),
        minutes.meeting_date.isoformat(),
        board_minutes_service.summarize(minutes),
    )


@router.get("", response_model=List[BoardMinutesRead])
def list_minutes(
    repo: BoardMinutesRepository = Depends(get_board_minutes_repository),
    user: User = Depends(get_current_user),
):
    return [BoardMinutesRead.model_validate(m) for m in board_minutes_service.list_minutes(repo, user)]


@router.get("/{minutes_id}", response_model=BoardMinutesRead)
def get_minutes(
    minutes_id: int,
    repo: BoardMinutesRepository = Depends(get_board_minutes_repository),
    user: User = Depends(get_current_user),
):
    return BoardMinutesRead.model_validate(board_minutes_service.get_minutes(repo, user, minutes_id))


@router.post("", response_model=BoardMinutesRead, status_code=status.HTTP_201_CREATED)
def post_minutes(
    body: BoardMinutesCreate,
    background_tasks: BackgroundTasks,
    repo: BoardMinutesRepository = Depends(get_board_minutes_repository),
    user_repo: UserRepository = Depends(get_user_repository),
    user: User = Depends(require_board_member),
):
    minutes = board_minutes_service.create_minutes(repo, user, body)
    if minutes.is_published:
        _notify_published(background_tasks, user_repo, minutes)
    return BoardMinutesRead.model_validate(minutes)


@router.patch("/{minutes_id}", response_model=BoardMinutesRead)
def patch_minutes(
    minutes_id: int,
    body: BoardMinutesUpdate,
    background_tasks: BackgroundTasks,
    repo: BoardMinutesRepository = Depends(get_board_minutes_repository),
    user_repo: UserRepository = Depends(get_user_repository),
    user: User = Depends(require_board_member),
):
    minutes, published_now = board_minutes_service.update_minutes(repo, user, minutes_id, body)
    if published_now:
        _notify_published(background_tasks, user_repo, minutes)
    return BoardMinutesRead.model_validate(minutes)


@router.delete("/{minutes_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_minutes(
    minutes_id: int,
    repo: BoardMinutesRepository = Depends(get_board_minutes_repository),
    user: User = Depends(require_board_member),
):
    board_minutes_service.delete_minutes(repo, user, minutes_id)
