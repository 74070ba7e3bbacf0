"""
Lead Repository Interface.
Leads, goals and the aggregates computed over them.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from blu_networking.domain.repositories.base import BaseRepository
from blu_networking.domain.models.lead import Lead
from blu_networking.domain.models.user_goal import UserGoal


class LeadRepository(BaseRepository[Lead]):
    """Interface for Lead-specific operations."""

    def list_by_user(self, user_id: int) -> List[Lead]:
        """Leads owned by one member, newest first."""
        ...

    def count_by_user(
        self,
        user_id: int,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
        status: Optional[str] = None,
    ) -> int:
        ...

    def count_all(self) -> int:
        ...

    def total_value_by_user(self, user_id: int) -> int:
        """SUM of lead values; 0 when the member has none."""
        ...

    def average_value(self) -> float:
        """AVG of lead values across all members; 0 on an empty table."""
        ...

    def counts_by_type(self, user_id: int, since: Optional[datetime] = None) -> Dict[str, int]:
        ...

    def counts_by_status(self, user_id: int, since: Optional[datetime] = None) -> Dict[str, int]:
        ...

    def created_since(self, user_id: int, since: datetime) -> List[Lead]:
        ...

    def due_for_follow_up(self, day: date) -> List[Lead]:
        ...

    def top_members(self, limit: int = 5, since: Optional[datetime] = None) -> List[Dict[str, Any]]:
        """Members ranked by total lead value."""
        ...


class GoalRepository(BaseRepository[UserGoal]):
    """Interface for UserGoal operations."""

    def current_for_user(self, user_id: int, today: date) -> Optional[UserGoal]:
        """The goal whose [start_date, end_date] range contains today."""
        ...
