"""
Event Repository Interface.
Events plus their registrations.
"""

from datetime import date
from typing import Dict, List, Optional

from blu_networking.domain.repositories.base import BaseRepository
from blu_networking.domain.models.event import Event, EventRegistration


class EventRepository(BaseRepository[Event]):
    """Interface for Event-specific operations."""

    def list_all(self) -> List[Event]:
        """All events, most recent date first."""
        ...

    def count_active(self, today: date) -> int:
        """Events dated today or later."""
        ...

    def get_registration(self, event_id: int, user_id: int) -> Optional[EventRegistration]:
        ...

    def get_registration_by_id(self, registration_id: int) -> Optional[EventRegistration]:
        ...

    def count_registrations(self, event_id: int) -> int:
        ...

    def registration_counts(self) -> Dict[int, int]:
        """Registration count per event id, in one query."""
        ...

    def registrations_for_user(self, user_id: int) -> List[EventRegistration]:
        ...

    def register(self, event_id: int, user_id: int) -> EventRegistration:
        """Register atomically. Raises on unknown event, duplicate or full capacity."""
        ...

    def check_in(self, registration: EventRegistration) -> EventRegistration:
        ...

    def count_attended_by_user(
        self, user_id: int, since: Optional[date] = None, until: Optional[date] = None
    ) -> int:
        ...

    def attended_events_for_user(self, user_id: int, since: date) -> List[Event]:
        ...
