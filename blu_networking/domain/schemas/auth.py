"""Pydantic schemas for User and Auth."""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from blu_networking.domain.models.user import UserLevel
from blu_networking.domain.schemas.common import CamelModel


class UserCreate(CamelModel):
    username: str = Field(min_length=3, max_length=100)
    password: str = Field(min_length=6)
    full_name: str = Field(min_length=1)
    email: EmailStr
    company: str = Field(min_length=1)
    title: str = Field(min_length=1)
    bio: Optional[str] = None
    industry: Optional[str] = None
    expertise: Optional[str] = None
    profile_image: Optional[str] = None
    phone_number: Optional[str] = None
    chapter_id: Optional[int] = None


class UserRead(CamelModel):
    id: int
    username: str
    full_name: str
    email: str
    company: str
    title: str
    bio: Optional[str] = None
    industry: Optional[str] = None
    expertise: Optional[str] = None
    profile_image: Optional[str] = None
    is_admin: bool
    user_level: UserLevel
    chapter_id: Optional[int] = None
    phone_number: Optional[str] = None
    joined_at: Optional[datetime] = None


class LoginRequest(CamelModel):
    username: str
    password: str


class ChangePasswordRequest(CamelModel):
    current_password: str
    new_password: str = Field(min_length=6)


class ProfileUpdate(CamelModel):
    """Fields a member may edit on their own profile. Anything else is dropped."""
    full_name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    company: Optional[str] = Field(default=None, min_length=1)
    title: Optional[str] = Field(default=None, min_length=1)
    bio: Optional[str] = None
    industry: Optional[str] = None
    expertise: Optional[str] = None
    profile_image: Optional[str] = None
    phone_number: Optional[str] = None

    @field_validator("full_name", "email", "company", "title")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value


class UserLevelUpdate(CamelModel):
    user_level: UserLevel


class NotificationPreferences(CamelModel):
    email_notifications: bool = True
    event_reminders: bool = True
    lead_updates: bool = True
    membership_news: bool = True
