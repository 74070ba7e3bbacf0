"""Member messaging routes."""

from typing import List

from fastapi import APIRouter, Depends, status

from blu_networking.application.services import message_service
from blu_networking.domain.models.user import User
from blu_networking.domain.repositories.message_repository import MessageRepository
from blu_networking.domain.repositories.user_repository import UserRepository
from blu_networking.domain.schemas.message import MessageCreate, MessageRead
from blu_networking.interfaces.api.deps import get_current_user, require_board_member
from blu_networking.interfaces.deps import get_message_repository, get_user_repository

router = APIRouter(prefix="/api/messages", tags=["Messages"])


@router.post("", response_model=MessageRead, status_code=status.HTTP_201_CREATED)
def post_message(
    body: MessageCreate,
    repo: MessageRepository = Depends(get_message_repository),
    user_repo: UserRepository = Depends(get_user_repository),
    user: User = Depends(get_current_user),
):
    return MessageRead.model_validate(message_service.send_message(repo, user_repo, user, body))


@router.get("", response_model=List[MessageRead])
def get_messages(
    repo: MessageRepository = Depends(get_message_repository),
    user: User = Depends(get_current_user),
):
    return [MessageRead.model_validate(m) for m in message_service.list_messages(repo, user)]


@router.get("/chapter", response_model=List[MessageRead])
def get_chapter_messages(
    repo: MessageRepository = Depends(get_message_repository),
    user: User = Depends(require_board_member),
):
    return [MessageRead.model_validate(m) for m in message_service.list_chapter_messages(repo, user)]


@router.get("/{other_user_id}", response_model=List[MessageRead])
def get_conversation(
    other_user_id: int,
    repo: MessageRepository = Depends(get_message_repository),
    user_repo: UserRepository = Depends(get_user_repository),
    user: User = Depends(get_current_user),
):
    messages = message_service.get_conversation(repo, user_repo, user, other_user_id)
    return [MessageRead.model_validate(m) for m in messages]


@router.patch("/{message_id}/read", response_model=MessageRead)
def patch_read(
    message_id: int,
    repo: MessageRepository = Depends(get_message_repository),
    user: User = Depends(get_current_user),
):
    return MessageRead.model_validate(message_service.mark_read(repo, user, message_id))
