"""
SQLAlchemy Implementation of Chapter Repository.
"""

from typing import Any, Dict, List, Optional, Tuple

import structlog
from sqlalchemy.exc import IntegrityError

from blu_networking.core.exceptions import BusinessRuleViolationException
from blu_networking.domain.models.chapter import Chapter, OrganizationSettings, DEFAULT_FEATURES
from blu_networking.domain.models.user import User, UserLevel
from blu_networking.domain.repositories.chapter_repository import ChapterRepository
from blu_networking.infrastructure.repositories.base_repository import SQLAlchemyRepository

logger = structlog.get_logger(__name__)


class SQLAlchemyChapterRepository(SQLAlchemyRepository[Chapter], ChapterRepository):
    """Chapter repository implementation using SQLAlchemy."""

    def list_active(self) -> List[Chapter]:
        return (
            self.db.query(Chapter)
            .filter(Chapter.is_active.is_(True))
            .order_by(Chapter.name)
            .all()
        )

    def get_settings(self, chapter_id: int) -> OrganizationSettings:
        settings = (
            self.db.query(OrganizationSettings)
            .filter(OrganizationSettings.chapter_id == chapter_id)
            .first()
        )
        if settings is None:
            settings = OrganizationSettings(chapter_id=chapter_id, features_enabled=dict(DEFAULT_FEATURES))
            self.db.add(settings)
            self.db.commit()
            self.db.refresh(settings)
        return settings

    def update_settings(self, settings: OrganizationSettings, data: Dict[str, Any]) -> OrganizationSettings:
        features = data.pop("features_enabled", None)
        for field, value in data.items():
            setattr(settings, field, value)
        if features is not None:
            # Reassign so the JSON column is flagged dirty
            settings.features_enabled = {**(settings.features_enabled or {}), **features}
        self.db.commit()
        self.db.refresh(settings)
        return settings

    def create_with_admin(
        self,
        chapter_data: Dict[str, Any],
        admin_data: Dict[str, Any],
        settings_data: Optional[Dict[str, Any]] = None,
    ) -> Tuple[Chapter, User, OrganizationSettings]:
        settings_data = dict(settings_data or {})
        features = settings_data.pop("features_enabled", None) or {}
        try:
            chapter = Chapter(**chapter_data)
            self.db.add(chapter)
            self.db.flush()

            settings = OrganizationSettings(
                chapter_id=chapter.id,
                features_enabled={**DEFAULT_FEATURES, **features},
                **settings_data,
            )
            admin = User(
                **admin_data,
                chapter_id=chapter.id,
                user_level=UserLevel.EXECUTIVE_BOARD,
                is_admin=True,
            )
            self.db.add_all([settings, admin])
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("Organization creation rolled back", error=str(exc.orig))
            raise BusinessRuleViolationException("Username or email already exists") from exc
        except Exception:
            self.db.rollback()
            raise

        for obj in (chapter, settings, admin):
            self.db.refresh(obj)
        return chapter, admin, settings
