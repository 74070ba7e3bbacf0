"""Pydantic schemas for Chapters and organization settings."""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from blu_networking.domain.schemas.auth import UserRead
from blu_networking.domain.schemas.common import CamelModel


class ChapterCreate(CamelModel):
    name: str = Field(min_length=1)
    location: str = Field(min_length=1)
    description: Optional[str] = None
    is_active: bool = True


class ChapterUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("name", "location", "is_active")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value


class ChapterRead(CamelModel):
    id: int
    name: str
    location: str
    description: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None


class FeaturesEnabled(CamelModel):
    events: bool = True
    leads: bool = True
    messaging: bool = True
    member_directory: bool = True
    board_minutes: bool = True
    member_spotlights: bool = True
    payments: bool = False
    email_campaigns: bool = False
    custom_forms: bool = False


class OrganizationSettingsRead(CamelModel):
    id: int
    chapter_id: int
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    website_url: Optional[str] = None
    welcome_message: Optional[str] = None
    timezone: Optional[str] = None
    date_format: Optional[str] = None
    logo_url: Optional[str] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    accent_color: Optional[str] = None
    custom_domain: Optional[str] = None
    subdomain: Optional[str] = None
    features_enabled: FeaturesEnabled
    updated_at: Optional[datetime] = None


class OrganizationSettingsUpdate(CamelModel):
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = None
    website_url: Optional[str] = None
    welcome_message: Optional[str] = None
    timezone: Optional[str] = None
    date_format: Optional[str] = None
    logo_url: Optional[str] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    accent_color: Optional[str] = None
    custom_domain: Optional[str] = None
    subdomain: Optional[str] = None
    features_enabled: Optional[FeaturesEnabled] = None


class OrgAdminCreate(CamelModel):
    """Executive-board admin account for an existing chapter."""
    chapter_id: int
    username: str = Field(min_length=3, max_length=100)
    password: str = Field(min_length=6)
    full_name: str = Field(min_length=1)
    email: EmailStr
    company: Optional[str] = None
    title: Optional[str] = None


class OrganizationAdmin(CamelModel):
    username: str = Field(min_length=3, max_length=100)
    password: str = Field(min_length=6)
    full_name: str = Field(min_length=1)
    email: EmailStr
    company: Optional[str] = None
    title: Optional[str] = None


class OrganizationCreate(CamelModel):
    chapter: ChapterCreate
    admin: OrganizationAdmin
    settings: Optional[OrganizationSettingsUpdate] = None


class OrganizationCreated(CamelModel):
    chapter: ChapterRead
    admin: UserRead
    settings: OrganizationSettingsRead
