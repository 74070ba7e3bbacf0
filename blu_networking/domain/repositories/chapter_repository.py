"""
Chapter Repository Interface.
Chapters (organizations) and their settings record.
"""

from typing import List, Optional, Dict, Any, Tuple

from blu_networking.domain.repositories.base import BaseRepository
from blu_networking.domain.models.chapter import Chapter, OrganizationSettings
from blu_networking.domain.models.user import User


class ChapterRepository(BaseRepository[Chapter]):
    """Interface for Chapter-specific operations."""

    def list_active(self) -> List[Chapter]:
        ...

    def get_settings(self, chapter_id: int) -> OrganizationSettings:
        """Return the chapter's settings, creating the default record on first read."""
        ...

    def update_settings(self, settings: OrganizationSettings, data: Dict[str, Any]) -> OrganizationSettings:
        ...

    def create_with_admin(
        self,
        chapter_data: Dict[str, Any],
        admin_data: Dict[str, Any],
        settings_data: Optional[Dict[str, Any]] = None,
    ) -> Tuple[Chapter, User, OrganizationSettings]:
        """Create chapter, settings and admin user in a single transaction."""
        ...
