"""Chapter, super-admin and organization settings routes."""

from typing import List

from fastapi import APIRouter, Depends, status

from blu_networking.application.services.organization_service import (
    create_chapter,
    create_org_admin,
    create_organization,
    get_settings_for_user,
    update_chapter,
    update_settings_for_user,
)
from blu_networking.domain.models.user import User
from blu_networking.domain.repositories.chapter_repository import ChapterRepository
from blu_networking.domain.repositories.user_repository import UserRepository
from blu_networking.domain.schemas.auth import UserRead
from blu_networking.domain.schemas.chapter import (
    ChapterCreate,
    ChapterRead,
    ChapterUpdate,
    OrgAdminCreate,
    OrganizationCreate,
    OrganizationCreated,
    OrganizationSettingsRead,
    OrganizationSettingsUpdate,
)
from blu_networking.interfaces.api.deps import get_current_user, require_board_member, require_executive_board
from blu_networking.interfaces.deps import get_chapter_repository, get_user_repository

router = APIRouter(prefix="/api", tags=["Organizations"])


@router.get("/chapters", response_model=List[ChapterRead])
def list_chapters(
    repo: ChapterRepository = Depends(get_chapter_repository),
    user: User = Depends(get_current_user),
):
    return [ChapterRead.model_validate(c) for c in repo.list_active()]


@router.post("/chapters", response_model=ChapterRead, status_code=status.HTTP_201_CREATED)
def post_chapter(
    body: ChapterCreate,
    repo: ChapterRepository = Depends(get_chapter_repository),
    user: User = Depends(require_executive_board),
):
    return ChapterRead.model_validate(create_chapter(repo, body))


@router.patch("/chapters/{chapter_id}", response_model=ChapterRead)
def patch_chapter(
    chapter_id: int,
    body: ChapterUpdate,
    repo: ChapterRepository = Depends(get_chapter_repository),
    user: User = Depends(require_executive_board),
):
    return ChapterRead.model_validate(update_chapter(repo, chapter_id, body))


@router.post("/super-admin/create-org-admin", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def post_org_admin(
    body: OrgAdminCreate,
    chapter_repo: ChapterRepository = Depends(get_chapter_repository),
    user_repo: UserRepository = Depends(get_user_repository),
    user: User = Depends(require_executive_board),
):
    return UserRead.model_validate(create_org_admin(chapter_repo, user_repo, body))


@router.post("/super-admin/organizations", response_model=OrganizationCreated, status_code=status.HTTP_201_CREATED)
def post_organization(
    body: OrganizationCreate,
    chapter_repo: ChapterRepository = Depends(get_chapter_repository),
    user_repo: UserRepository = Depends(get_user_repository),
    user: User = Depends(require_executive_board),
):
    chapter, admin, settings = create_organization(chapter_repo, user_repo, body)
    return OrganizationCreated(
        chapter=ChapterRead.model_validate(chapter),
        admin=UserRead.model_validate(admin),
        settings=OrganizationSettingsRead.model_validate(settings),
    )


@router.get("/organization/settings", response_model=OrganizationSettingsRead)
def get_organization_settings(
    repo: ChapterRepository = Depends(get_chapter_repository),
    user: User = Depends(get_current_user),
):
    return OrganizationSettingsRead.model_validate(get_settings_for_user(repo, user))


@router.patch("/organization/settings", response_model=OrganizationSettingsRead)
def patch_organization_settings(
    body: OrganizationSettingsUpdate,
    repo: ChapterRepository = Depends(get_chapter_repository),
    user: User = Depends(require_board_member),
):
    return OrganizationSettingsRead.model_validate(update_settings_for_user(repo, user, body))
