"""
Board Meeting Minutes Repository Interface.
"""

from typing import List, Optional

from blu_networking.domain.repositories.base import BaseRepository
from blu_networking.domain.models.board_meeting_minutes import BoardMeetingMinutes


class BoardMinutesRepository(BaseRepository[BoardMeetingMinutes]):
    """Interface for BoardMeetingMinutes operations."""

    def list_visible(self, chapter_id: Optional[int], published_only: bool) -> List[BoardMeetingMinutes]:
        """Minutes of one chapter (all chapters when chapter_id is None), latest meeting first."""
        ...
