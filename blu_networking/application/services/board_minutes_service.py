"""Board meeting minutes service.

Visibility: members read the published minutes of their own chapter, board
members read every record of their chapter, and an executive without a
chapter reads everything.
"""

from typing import List, Tuple

import structlog

from blu_networking.core.exceptions import (
    BusinessRuleViolationException,
    EntityNotFoundException,
    ForbiddenException,
)
from blu_networking.domain.models.board_meeting_minutes import BoardMeetingMinutes
from blu_networking.domain.models.user import User, UserLevel
from blu_networking.domain.repositories.board_minutes_repository import BoardMinutesRepository
from blu_networking.domain.schemas.board_minutes import BoardMinutesCreate, BoardMinutesUpdate

logger = structlog.get_logger(__name__)

SUMMARY_LENGTH = 300


def _sees_all_chapters(user: User) -> bool:
    return user.has_level(UserLevel.EXECUTIVE_BOARD) and user.chapter_id is None


def _can_read(user: User, minutes: BoardMeetingMinutes) -> bool:
    if _sees_all_chapters(user):
        return True
    if minutes.chapter_id != user.chapter_id:
        return False
    return minutes.is_published or user.has_level(UserLevel.BOARD_MEMBER)


def list_minutes(repo: BoardMinutesRepository, user: User) -> List[BoardMeetingMinutes]:
    if _sees_all_chapters(user):
        return repo.list_visible(None, published_only=False)
    if user.chapter_id is None:
        return []
    return repo.list_visible(user.chapter_id, published_only=not user.has_level(UserLevel.BOARD_MEMBER))


def get_minutes(repo: BoardMinutesRepository, user: User, minutes_id: int) -> BoardMeetingMinutes:
    minutes = repo.get_by_id(minutes_id)
    if minutes is None or not _can_read(user, minutes):
        raise EntityNotFoundException("Board minutes not found")
    return minutes


def create_minutes(repo: BoardMinutesRepository, user: User, body: BoardMinutesCreate) -> BoardMeetingMinutes:
    data = body.model_dump()
    chapter_id = data.pop("chapter_id") or user.chapter_id
    if chapter_id is None:
        raise BusinessRuleViolationException("chapterId is required")
    if not _sees_all_chapters(user) and chapter_id != user.chapter_id:
        raise ForbiddenException("Cannot record minutes for another chapter")

    data["chapter_id"] = chapter_id
    data["created_by_id"] = user.id
    minutes = repo.create(data)
    logger.info("Board minutes created", minutes_id=minutes.id, chapter_id=chapter_id, published=minutes.is_published)
    return minutes


def update_minutes(
    repo: BoardMinutesRepository, user: User, minutes_id: int, body: BoardMinutesUpdate
) -> Tuple[BoardMeetingMinutes, bool]:
    """Apply a partial update. The flag is True when this update published the minutes."""
    minutes = get_minutes(repo, user, minutes_id)
    was_published = minutes.is_published
    minutes = repo.update(minutes, body.model_dump(exclude_unset=True))
    return minutes, minutes.is_published and not was_published


def delete_minutes(repo: BoardMinutesRepository, user: User, minutes_id: int) -> None:
    minutes = get_minutes(repo, user, minutes_id)
    repo.delete(minutes.id)
    logger.info("Board minutes deleted", minutes_id=minutes_id)


def summarize(minutes: BoardMeetingMinutes) -> str:
    text = (minutes.agenda or minutes.minutes or "").strip()
    if len(text) > SUMMARY_LENGTH:
        text = text[:SUMMARY_LENGTH].rstrip() + "..."
    return text
