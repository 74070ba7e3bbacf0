"""
SQLAlchemy Implementation of Board Meeting Minutes Repository.
"""

from typing import List, Optional

from blu_networking.domain.models.board_meeting_minutes import BoardMeetingMinutes
from blu_networking.domain.repositories.board_minutes_repository import BoardMinutesRepository
from blu_networking.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyBoardMinutesRepository(SQLAlchemyRepository[BoardMeetingMinutes], BoardMinutesRepository):
    """Board minutes repository implementation using SQLAlchemy."""

    def list_visible(self, chapter_id: Optional[int], published_only: bool) -> List[BoardMeetingMinutes]:
        query = self.db.query(BoardMeetingMinutes)
        if chapter_id is not None:
            query = query.filter(BoardMeetingMinutes.chapter_id == chapter_id)
        if published_only:
            query = query.filter(BoardMeetingMinutes.is_published.is_(True))
        return query.order_by(BoardMeetingMinutes.meeting_date.desc(), BoardMeetingMinutes.id.desc()).all()
