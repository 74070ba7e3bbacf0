"""
Member Message Repository Interface.
"""

from datetime import datetime
from typing import List, Optional

from blu_networking.domain.repositories.base import BaseRepository
from blu_networking.domain.models.member_message import MemberMessage


class MessageRepository(BaseRepository[MemberMessage]):
    """Interface for MemberMessage operations."""

    def list_by_chapter(self, chapter_id: int) -> List[MemberMessage]:
        ...

    def list_for_user(self, user_id: int, since: Optional[datetime] = None) -> List[MemberMessage]:
        """Messages sent or received by the user, newest first."""
        ...

    def list_between(self, user_id: int, other_user_id: int) -> List[MemberMessage]:
        ...

    def mark_read(self, message: MemberMessage) -> MemberMessage:
        ...

    def count_distinct_contacts(
        self, user_id: int, since: Optional[datetime] = None, until: Optional[datetime] = None
    ) -> int:
        """Distinct members the user has exchanged messages with."""
        ...
