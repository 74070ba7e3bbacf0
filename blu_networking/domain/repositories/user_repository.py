"""
User Repository Interface.
Defines specific data access operations for Users.
"""

from typing import List, Optional, Dict, Any

from blu_networking.domain.repositories.base import BaseRepository
from blu_networking.domain.models.user import User, UserLevel


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_by_username(self, username: str) -> Optional[User]:
        ...

    def get_by_email(self, email: str) -> Optional[User]:
        ...

    def update_profile(self, user: User, data: Dict[str, Any]) -> User:
        """Apply a partial update, ignoring id, password, admin flag, level and join date."""
        ...

    def update_password(self, user: User, password_hash: str) -> User:
        ...

    def update_level(self, user: User, level: UserLevel) -> User:
        """Change the role and keep the derived is_admin flag in step."""
        ...

    def list_all(self) -> List[User]:
        ...

    def list_by_chapter(self, chapter_id: int) -> List[User]:
        ...

    def emails_by_chapter(self, chapter_id: int) -> List[str]:
        """Addresses of every member of a chapter."""
        ...

    def count(self) -> int:
        ...
