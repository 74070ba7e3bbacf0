"""Member directory and profile routes."""

from typing import List

from fastapi import APIRouter, Depends

from blu_networking.application.services.member_service import list_members, update_profile
from blu_networking.domain.models.user import User
from blu_networking.domain.repositories.user_repository import UserRepository
from blu_networking.domain.schemas.auth import NotificationPreferences, ProfileUpdate, UserRead
from blu_networking.domain.schemas.common import MessageResponse
from blu_networking.interfaces.api.deps import get_current_user
from blu_networking.interfaces.deps import get_user_repository

router = APIRouter(prefix="/api", tags=["Members"])


@router.get("/members", response_model=List[UserRead])
def members(
    repo: UserRepository = Depends(get_user_repository),
    user: User = Depends(get_current_user),
):
    return [UserRead.model_validate(u) for u in list_members(repo, user)]


@router.patch("/profile", response_model=UserRead)
def patch_profile(
    body: ProfileUpdate,
    repo: UserRepository = Depends(get_user_repository),
    user: User = Depends(get_current_user),
):
    return UserRead.model_validate(update_profile(repo, user, body))


@router.patch("/notifications", response_model=MessageResponse)
def patch_notifications(body: NotificationPreferences, user: User = Depends(get_current_user)):
    # Preferences are acknowledged only; there is no per-member storage for them yet.
    return MessageResponse(message="Notification preferences updated")
