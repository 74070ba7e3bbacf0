"""
SQLAlchemy Implementation of Event Repository.
"""

from datetime import date
from typing import Dict, List, Optional

import structlog
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from blu_networking.core.exceptions import BusinessRuleViolationException, EntityNotFoundException
from blu_networking.core.timeutils import utc_now
from blu_networking.domain.models.event import Event, EventRegistration
from blu_networking.domain.repositories.event_repository import EventRepository
from blu_networking.infrastructure.repositories.base_repository import SQLAlchemyRepository

logger = structlog.get_logger(__name__)

ALREADY_REGISTERED = "Already registered for this event"
FULL_CAPACITY = "Event is at full capacity"


class SQLAlchemyEventRepository(SQLAlchemyRepository[Event], EventRepository):
    """Event repository implementation using SQLAlchemy."""

    def list_all(self) -> List[Event]:
        return self.db.query(Event).order_by(Event.date.desc(), Event.start_time.desc()).all()

    def count_active(self, today: date) -> int:
        return self.db.query(func.count(Event.id)).filter(Event.date >= today).scalar() or 0

    def get_registration(self, event_id: int, user_id: int) -> Optional[EventRegistration]:
        return (
            self.db.query(EventRegistration)
            .filter(EventRegistration.event_id == event_id, EventRegistration.user_id == user_id)
            .first()
        )

    def get_registration_by_id(self, registration_id: int) -> Optional[EventRegistration]:
        return self.db.get(EventRegistration, registration_id)

    def count_registrations(self, event_id: int) -> int:
        return (
            self.db.query(func.count(EventRegistration.id))
            .filter(EventRegistration.event_id == event_id)
            .scalar()
            or 0
        )

    def registration_counts(self) -> Dict[int, int]:
        rows = (
            self.db.query(EventRegistration.event_id, func.count(EventRegistration.id))
            .group_by(EventRegistration.event_id)
            .all()
        )
        return {event_id: count for event_id, count in rows}

    def registrations_for_user(self, user_id: int) -> List[EventRegistration]:
        return self.db.query(EventRegistration).filter(EventRegistration.user_id == user_id).all()

    def register(self, event_id: int, user_id: int) -> EventRegistration:
        """
        Duplicate and capacity checks run inside one transaction while the
        event row is locked, so concurrent registrations serialize on it.
        The (event_id, user_id) unique constraint backs up the duplicate check.
        """
        try:
            event = (
                self.db.query(Event)
                .filter(Event.id == event_id)
                .with_for_update()
                .first()
            )
            if event is None:
                raise EntityNotFoundException("Event not found")

            if self.get_registration(event_id, user_id) is not None:
                raise BusinessRuleViolationException(ALREADY_REGISTERED)

            if event.capacity is not None and self.count_registrations(event_id) >= event.capacity:
                raise BusinessRuleViolationException(FULL_CAPACITY)

            registration = EventRegistration(event_id=event_id, user_id=user_id, attended=False)
            self.db.add(registration)
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.info("Duplicate registration rejected by constraint", event_id=event_id, user_id=user_id)
            raise BusinessRuleViolationException(ALREADY_REGISTERED) from exc
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(registration)
        return registration

    def check_in(self, registration: EventRegistration) -> EventRegistration:
        registration.attended = True
        registration.checked_in_at = utc_now()
        self.db.commit()
        self.db.refresh(registration)
        return registration

    def _attended_query(self, user_id: int):
        return (
            self.db.query(Event)
            .join(EventRegistration, EventRegistration.event_id == Event.id)
            .filter(EventRegistration.user_id == user_id, EventRegistration.attended.is_(True))
        )

    def count_attended_by_user(
        self, user_id: int, since: Optional[date] = None, until: Optional[date] = None
    ) -> int:
        query = self._attended_query(user_id)
        if since is not None:
            query = query.filter(Event.date >= since)
        if until is not None:
            query = query.filter(Event.date < until)
        return query.count()

    def attended_events_for_user(self, user_id: int, since: date) -> List[Event]:
        return self._attended_query(user_id).filter(Event.date >= since).all()
