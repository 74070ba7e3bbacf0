"""FastAPI dependencies - session cookie auth and role gates."""

from typing import Optional

from fastapi import Depends
from fastapi.security import APIKeyCookie

from blu_networking.application.services.auth_service import decode_session_token
from blu_networking.config import get_settings
from blu_networking.core.exceptions import ForbiddenException, UnauthorizedException
from blu_networking.domain.models.user import User, UserLevel
from blu_networking.domain.repositories.user_repository import UserRepository
from blu_networking.interfaces.deps import get_user_repository

settings = get_settings()
session_cookie = APIKeyCookie(name=settings.SESSION_COOKIE_NAME, auto_error=False)


def get_current_user(
    token: Optional[str] = Depends(session_cookie),
    repo: UserRepository = Depends(get_user_repository),
) -> User:
    """Resolve the signed-in user from the session cookie."""
    if not token:
        raise UnauthorizedException()

    user_id = decode_session_token(token)
    if user_id is None:
        raise UnauthorizedException()

    user = repo.get_by_id(user_id)
    if user is None:
        raise UnauthorizedException()
    return user


def require_board_member(user: User = Depends(get_current_user)) -> User:
    """Require board_member level or above."""
    if not user.has_level(UserLevel.BOARD_MEMBER):
        raise ForbiddenException()
    return user


def require_executive_board(user: User = Depends(get_current_user)) -> User:
    """Require executive_board level."""
    if not user.has_level(UserLevel.EXECUTIVE_BOARD):
        raise ForbiddenException()
    return user
