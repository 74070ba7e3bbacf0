"""Member spotlight service."""

from typing import List, Optional

from blu_networking.core.exceptions import EntityNotFoundException
from blu_networking.core.timeutils import get_current_date
from blu_networking.domain.models.member_spotlight import MemberSpotlight
from blu_networking.domain.repositories.spotlight_repository import SpotlightRepository
from blu_networking.domain.repositories.user_repository import UserRepository
from blu_networking.domain.schemas.spotlight import SpotlightCreate


def get_active_spotlight(repo: SpotlightRepository) -> Optional[MemberSpotlight]:
    return repo.get_active(get_current_date())


def list_spotlights(repo: SpotlightRepository) -> List[MemberSpotlight]:
    return repo.list_all()


def create_spotlight(repo: SpotlightRepository, user_repo: UserRepository, body: SpotlightCreate) -> MemberSpotlight:
    if user_repo.get_by_id(body.user_id) is None:
        raise EntityNotFoundException("User not found")
    return repo.create(body.model_dump())
