"""
Member Spotlight Repository Interface.
"""

from datetime import date
from typing import List, Optional

from blu_networking.domain.repositories.base import BaseRepository
from blu_networking.domain.models.member_spotlight import MemberSpotlight


class SpotlightRepository(BaseRepository[MemberSpotlight]):
    """Spotlights are always returned with their user loaded."""

    def get_active(self, today: date) -> Optional[MemberSpotlight]:
        """Active spotlight not yet expired; newest wins when several match."""
        ...

    def list_all(self) -> List[MemberSpotlight]:
        ...
