"""Event service - listing, creation, registration and check-in."""

from typing import List, Tuple

import structlog

from blu_networking.core.exceptions import EntityNotFoundException, ForbiddenException
from blu_networking.core.timeutils import get_current_date
from blu_networking.domain.models.event import Event, EventRegistration
from blu_networking.domain.models.user import User, UserLevel
from blu_networking.domain.repositories.event_repository import EventRepository
from blu_networking.domain.repositories.user_repository import UserRepository
from blu_networking.domain.schemas.event import (
    AdminEventRead,
    EventCreate,
    EventDetail,
    EventRead,
    EventWithStatus,
    RegistrationCreate,
)

logger = structlog.get_logger(__name__)


def list_events_for_user(repo: EventRepository, user: User) -> List[EventWithStatus]:
    registrations = {r.event_id: r for r in repo.registrations_for_user(user.id)}
    result = []
    for event in repo.list_all():
        registration = registrations.get(event.id)
        result.append(EventWithStatus(
            **EventRead.model_validate(event).model_dump(),
            is_registered=registration is not None,
            attended=bool(registration and registration.attended),
        ))
    return result


def get_event_detail(repo: EventRepository, event_id: int) -> EventDetail:
    event = repo.get_by_id(event_id)
    if not event:
        raise EntityNotFoundException("Event not found")
    return EventDetail(
        **EventRead.model_validate(event).model_dump(),
        registration_count=repo.count_registrations(event_id),
    )


def create_event(repo: EventRepository, user: User, body: EventCreate) -> Event:
    data = body.model_dump()
    data["created_by_id"] = user.id
    event = repo.create(data)
    logger.info("Event created", event_id=event.id, created_by=user.id)
    return event


def register_for_event(
    event_repo: EventRepository,
    user_repo: UserRepository,
    actor: User,
    body: RegistrationCreate,
) -> Tuple[EventRegistration, Event, User]:
    """Register a member (the caller by default) for an event.

    Registering somebody else requires board level.
    """
    target_id = body.user_id if body.user_id is not None else actor.id
    if target_id != actor.id and not actor.has_level(UserLevel.BOARD_MEMBER):
        raise ForbiddenException("Only board members can register other members")

    registrant = actor if target_id == actor.id else user_repo.get_by_id(target_id)
    if registrant is None:
        raise EntityNotFoundException("User not found")

    registration = event_repo.register(body.event_id, registrant.id)
    event = event_repo.get_by_id(body.event_id)
    logger.info("Event registration created", event_id=event.id, user_id=registrant.id)
    return registration, event, registrant


def check_in(repo: EventRepository, registration_id: int) -> EventRegistration:
    registration = repo.get_registration_by_id(registration_id)
    if not registration:
        raise EntityNotFoundException("Registration not found")
    return repo.check_in(registration)


def list_admin_events(repo: EventRepository) -> List[AdminEventRead]:
    counts = repo.registration_counts()
    return [
        AdminEventRead(
            **EventRead.model_validate(event).model_dump(),
            attendee_count=counts.get(event.id, 0),
        )
        for event in repo.list_all()
    ]


def count_active_events(repo: EventRepository) -> int:
    return repo.count_active(get_current_date())
