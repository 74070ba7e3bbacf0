"""
Repository dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from blu_networking.infrastructure.database import get_db
from blu_networking.domain.models.board_meeting_minutes import BoardMeetingMinutes
from blu_networking.domain.models.chapter import Chapter
from blu_networking.domain.models.event import Event
from blu_networking.domain.models.lead import Lead
from blu_networking.domain.models.member_message import MemberMessage
from blu_networking.domain.models.member_spotlight import MemberSpotlight
from blu_networking.domain.models.user import User
from blu_networking.domain.models.user_goal import UserGoal
from blu_networking.domain.repositories.board_minutes_repository import BoardMinutesRepository
from blu_networking.domain.repositories.chapter_repository import ChapterRepository
from blu_networking.domain.repositories.event_repository import EventRepository
from blu_networking.domain.repositories.lead_repository import GoalRepository, LeadRepository
from blu_networking.domain.repositories.message_repository import MessageRepository
from blu_networking.domain.repositories.spotlight_repository import SpotlightRepository
from blu_networking.domain.repositories.user_repository import UserRepository
from blu_networking.infrastructure.repositories.board_minutes_repository import SQLAlchemyBoardMinutesRepository
from blu_networking.infrastructure.repositories.chapter_repository import SQLAlchemyChapterRepository
from blu_networking.infrastructure.repositories.event_repository import SQLAlchemyEventRepository
from blu_networking.infrastructure.repositories.lead_repository import (
    SQLAlchemyGoalRepository,
    SQLAlchemyLeadRepository,
)
from blu_networking.infrastructure.repositories.message_repository import SQLAlchemyMessageRepository
from blu_networking.infrastructure.repositories.spotlight_repository import SQLAlchemySpotlightRepository
from blu_networking.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db, User)


def get_chapter_repository(db: Session = Depends(get_db)) -> ChapterRepository:
    """Get chapter repository instance."""
    return SQLAlchemyChapterRepository(db, Chapter)


def get_event_repository(db: Session = Depends(get_db)) -> EventRepository:
    """Get event repository instance."""
    return SQLAlchemyEventRepository(db, Event)


def get_lead_repository(db: Session = Depends(get_db)) -> LeadRepository:
    """Get lead repository instance."""
    return SQLAlchemyLeadRepository(db, Lead)


def get_goal_repository(db: Session = Depends(get_db)) -> GoalRepository:
    """Get goal repository instance."""
    return SQLAlchemyGoalRepository(db, UserGoal)


def get_spotlight_repository(db: Session = Depends(get_db)) -> SpotlightRepository:
    """Get spotlight repository instance."""
    return SQLAlchemySpotlightRepository(db, MemberSpotlight)


def get_message_repository(db: Session = Depends(get_db)) -> MessageRepository:
    """Get message repository instance."""
    return SQLAlchemyMessageRepository(db, MemberMessage)


def get_board_minutes_repository(db: Session = Depends(get_db)) -> BoardMinutesRepository:
    """Get board minutes repository instance."""
    return SQLAlchemyBoardMinutesRepository(db, BoardMeetingMinutes)
