"""Auth API routes - register, login, logout, current user, change password."""

from fastapi import APIRouter, BackgroundTasks, Depends, Response, status

from blu_networking.application.services.auth_service import (
    authenticate_user,
    change_password,
    create_session_token,
    register_user,
)
from blu_networking.application.services.email_service import send_welcome_email
from blu_networking.config import get_settings
from blu_networking.core.exceptions import UnauthorizedException
from blu_networking.domain.models.user import User
from blu_networking.domain.repositories.chapter_repository import ChapterRepository
from blu_networking.domain.repositories.user_repository import UserRepository
from blu_networking.domain.schemas.auth import ChangePasswordRequest, LoginRequest, UserCreate, UserRead
from blu_networking.domain.schemas.common import MessageResponse
from blu_networking.interfaces.api.deps import get_current_user
from blu_networking.interfaces.deps import get_chapter_repository, get_user_repository

settings = get_settings()
router = APIRouter(prefix="/api", tags=["Auth"])


def set_session_cookie(response: Response, user: User) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=create_session_token(user),
        max_age=settings.SESSION_MAX_AGE_MINUTES * 60,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(
    body: UserCreate,
    response: Response,
    background_tasks: BackgroundTasks,
    repo: UserRepository = Depends(get_user_repository),
    chapter_repo: ChapterRepository = Depends(get_chapter_repository),
):
    user = register_user(repo, chapter_repo, body)
    set_session_cookie(response, user)

    chapter = chapter_repo.get_by_id(user.chapter_id) if user.chapter_id else None
    organization_name = chapter.name if chapter else settings.FROM_NAME
    background_tasks.add_task(send_welcome_email, user.email, user.full_name, organization_name)
    return UserRead.model_validate(user)


@router.post("/login", response_model=UserRead)
def login(body: LoginRequest, response: Response, repo: UserRepository = Depends(get_user_repository)):
    user = authenticate_user(repo, body.username, body.password)
    if not user:
        raise UnauthorizedException("Invalid username or password")

    set_session_cookie(response, user)
    return UserRead.model_validate(user)


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response):
    response.delete_cookie(settings.SESSION_COOKIE_NAME, httponly=True, samesite="lax")
    return MessageResponse(message="Logged out")


@router.get("/user", response_model=UserRead)
def get_me(user: User = Depends(get_current_user)):
    return UserRead.model_validate(user)


@router.post("/change-password", response_model=MessageResponse)
def update_password(
    body: ChangePasswordRequest,
    repo: UserRepository = Depends(get_user_repository),
    user: User = Depends(get_current_user),
):
    change_password(repo, user, body.current_password, body.new_password)
    return MessageResponse(message="Password updated")
