"""Event and registration routes."""

from typing import List

from fastapi import APIRouter, BackgroundTasks, Depends, status

from blu_networking.application.services.email_service import send_event_registration_email
from blu_networking.application.services.event_service import (
    check_in,
    create_event,
    get_event_detail,
    list_events_for_user,
    register_for_event,
)
from blu_networking.domain.models.user import User
from blu_networking.domain.repositories.event_repository import EventRepository
from blu_networking.domain.repositories.user_repository import UserRepository
from blu_networking.domain.schemas.event import (
    EventCreate,
    EventDetail,
    EventRead,
    EventWithStatus,
    RegistrationCreate,
    RegistrationRead,
)
from blu_networking.interfaces.api.deps import get_current_user, require_board_member
from blu_networking.interfaces.deps import get_event_repository, get_user_repository

router = APIRouter(prefix="/api", tags=["Events"])


@router.get("/events", response_model=List[EventWithStatus])
def list_events(
    repo: EventRepository = Depends(get_event_repository),
    user: User = Depends(get_current_user),
):
    return list_events_for_user(repo, user)


@router.get("/events/{event_id}", response_model=EventDetail)
def get_event(
    event_id: int,
    repo: EventRepository = Depends(get_event_repository),
    user: User = Depends(get_current_user),
):
    return get_event_detail(repo, event_id)


@router.post("/events", response_model=EventRead, status_code=status.HTTP_201_CREATED)
def post_event(
    body: EventCreate,
    repo: EventRepository = Depends(get_event_repository),
    user: User = Depends(require_board_member),
):
    return EventRead.model_validate(create_event(repo, user, body))


@router.post("/event-registrations", response_model=RegistrationRead, status_code=status.HTTP_201_CREATED)
def post_registration(
    body: RegistrationCreate,
    background_tasks: BackgroundTasks,
    event_repo: EventRepository = Depends(get_event_repository),
    user_repo: UserRepository = Depends(get_user_repository),
    user: User = Depends(get_current_user),
):
    registration, event, registrant = register_for_event(event_repo, user_repo, user, body)
    background_tasks.add_task(
        send_event_registration_email,
        registrant.email,
        registrant.full_name,
        event.title,
        f"{event.date:%A, %B %d, %Y} at {event.start_time:%H:%M}",
        event.location,
    )
    return RegistrationRead.model_validate(registration)


@router.post("/event-registrations/{registration_id}/check-in", response_model=RegistrationRead)
def post_check_in(
    registration_id: int,
    repo: EventRepository = Depends(get_event_repository),
    user: User = Depends(require_board_member),
):
    return RegistrationRead.model_validate(check_in(repo, registration_id))
