"""Chapter (organization) management service."""

from typing import Tuple

import structlog

from blu_networking.application.services.auth_service import ensure_unique, hash_password
from blu_networking.core.exceptions import EntityNotFoundException
from blu_networking.domain.models.chapter import Chapter, OrganizationSettings
from blu_networking.domain.models.user import User, UserLevel
from blu_networking.domain.repositories.chapter_repository import ChapterRepository
from blu_networking.domain.repositories.user_repository import UserRepository
from blu_networking.domain.schemas.chapter import (
    ChapterCreate,
    ChapterUpdate,
    OrgAdminCreate,
    OrganizationCreate,
    OrganizationSettingsUpdate,
)

logger = structlog.get_logger(__name__)


def _get_chapter(repo: ChapterRepository, chapter_id: int) -> Chapter:
    chapter = repo.get_by_id(chapter_id)
    if not chapter:
        raise EntityNotFoundException("Chapter not found")
    return chapter


def create_chapter(repo: ChapterRepository, body: ChapterCreate) -> Chapter:
    chapter = repo.create(body)
    logger.info("Chapter created", chapter_id=chapter.id, name=chapter.name)
    return chapter


def update_chapter(repo: ChapterRepository, chapter_id: int, body: ChapterUpdate) -> Chapter:
    chapter = _get_chapter(repo, chapter_id)
    return repo.update(chapter, body.model_dump(exclude_unset=True))


def _admin_fields(body) -> dict:
    return {
        "username": body.username,
        "password_hash": hash_password(body.password),
        "full_name": body.full_name,
        "email": body.email,
        "company": body.company or "",
        "title": body.title or "Administrator",
    }


def create_org_admin(chapter_repo: ChapterRepository, user_repo: UserRepository, body: OrgAdminCreate) -> User:
    """Second step of the two-step flow: an executive-board admin for an existing chapter."""
    _get_chapter(chapter_repo, body.chapter_id)
    ensure_unique(user_repo, body.username, body.email)
    data = _admin_fields(body)
    data["chapter_id"] = body.chapter_id
    data["user_level"] = UserLevel.EXECUTIVE_BOARD
    admin = user_repo.create(data)
    logger.info("Organization admin created", chapter_id=body.chapter_id, user_id=admin.id)
    return admin


def create_organization(
    chapter_repo: ChapterRepository, user_repo: UserRepository, body: OrganizationCreate
) -> Tuple[Chapter, User, OrganizationSettings]:
    ensure_unique(user_repo, body.admin.username, body.admin.email)
    chapter, admin, settings = chapter_repo.create_with_admin(
        body.chapter.model_dump(),
        _admin_fields(body.admin),
        _settings_fields(body.settings) if body.settings else None,
    )
    logger.info("Organization created", chapter_id=chapter.id, admin_id=admin.id)
    return chapter, admin, settings


def _settings_fields(body: OrganizationSettingsUpdate) -> dict:
    data = body.model_dump(exclude_unset=True, exclude={"features_enabled"})
    if body.features_enabled is not None:
        # Stored with the same camelCase keys the clients use
        data["features_enabled"] = body.features_enabled.model_dump(by_alias=True, exclude_unset=True)
    return data


def get_settings_for_user(repo: ChapterRepository, user: User) -> OrganizationSettings:
    if user.chapter_id is None:
        raise EntityNotFoundException("No organization assigned")
    return repo.get_settings(user.chapter_id)


def update_settings_for_user(
    repo: ChapterRepository, user: User, body: OrganizationSettingsUpdate
) -> OrganizationSettings:
    settings = get_settings_for_user(repo, user)
    return repo.update_settings(settings, _settings_fields(body))
