"""Member directory and profile service."""

from typing import List

from blu_networking.core.exceptions import BusinessRuleViolationException, EntityNotFoundException
from blu_networking.domain.models.user import User, UserLevel
from blu_networking.domain.repositories.user_repository import UserRepository
from blu_networking.domain.schemas.auth import ProfileUpdate


def list_members(repo: UserRepository, user: User) -> List[User]:
    """Board and above see everyone. Plain members only see their own chapter."""
    if user.has_level(UserLevel.BOARD_MEMBER):
        return repo.list_all()
    if user.chapter_id is None:
        return [user]
    return repo.list_by_chapter(user.chapter_id)


def update_profile(repo: UserRepository, user: User, body: ProfileUpdate) -> User:
    data = body.model_dump(exclude_unset=True)
    email = data.get("email")
    if email:
        existing = repo.get_by_email(email)
        if existing and existing.id != user.id:
            raise BusinessRuleViolationException("Email already exists")
    return repo.update_profile(user, data)


def set_user_level(repo: UserRepository, user_id: int, level: UserLevel) -> User:
    user = repo.get_by_id(user_id)
    if not user:
        raise EntityNotFoundException("User not found")
    return repo.update_level(user, level)
