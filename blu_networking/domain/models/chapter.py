"""Chapter (organization) and its branding/settings record."""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, JSON
from sqlalchemy.sql import func

from blu_networking.infrastructure.database import Base


DEFAULT_FEATURES = {
    "events": True,
    "leads": True,
    "messaging": True,
    "memberDirectory": True,
    "boardMinutes": True,
    "memberSpotlights": True,
    "payments": False,
    "emailCampaigns": False,
    "customForms": False,
}


class Chapter(Base):
    __tablename__ = "chapters"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    location = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Chapter {self.name}>"


class OrganizationSettings(Base):
    __tablename__ = "organization_settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    chapter_id = Column(Integer, ForeignKey("chapters.id"), unique=True, nullable=False)

    # Contact
    contact_email = Column(String(255), nullable=True)
    contact_phone = Column(String(30), nullable=True)
    website_url = Column(String(500), nullable=True)
    welcome_message = Column(Text, nullable=True)

    # Locale
    timezone = Column(String(64), default="America/New_York")
    date_format = Column(String(32), default="MM/DD/YYYY")

    # Branding
    logo_url = Column(String(500), nullable=True)
    primary_color = Column(String(16), default="#1e40af")
    secondary_color = Column(String(16), default="#64748b")
    accent_color = Column(String(16), default="#0ea5e9")
    custom_domain = Column(String(255), nullable=True)
    subdomain = Column(String(100), nullable=True)

    features_enabled = Column(JSON, nullable=False, default=lambda: dict(DEFAULT_FEATURES))
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<OrganizationSettings chapter={self.chapter_id}>"
