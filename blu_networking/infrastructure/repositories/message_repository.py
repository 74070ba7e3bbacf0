"""
SQLAlchemy Implementation of Member Message Repository.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, case, func, or_

from blu_networking.domain.models.member_message import MemberMessage
from blu_networking.domain.repositories.message_repository import MessageRepository
from blu_networking.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyMessageRepository(SQLAlchemyRepository[MemberMessage], MessageRepository):
    """Message repository implementation using SQLAlchemy."""

    def _newest_first(self, query):
        return query.order_by(MemberMessage.sent_at.desc(), MemberMessage.id.desc())

    def list_by_chapter(self, chapter_id: int) -> List[MemberMessage]:
        query = self.db.query(MemberMessage).filter(MemberMessage.chapter_id == chapter_id)
        return self._newest_first(query).all()

    def list_for_user(self, user_id: int, since: Optional[datetime] = None) -> List[MemberMessage]:
        query = self.db.query(MemberMessage).filter(
            or_(MemberMessage.from_user_id == user_id, MemberMessage.to_user_id == user_id)
        )
        if since is not None:
            query = query.filter(MemberMessage.sent_at >= since)
        return self._newest_first(query).all()

    def list_between(self, user_id: int, other_user_id: int) -> List[MemberMessage]:
        query = self.db.query(MemberMessage).filter(
            or_(
                and_(MemberMessage.from_user_id == user_id, MemberMessage.to_user_id == other_user_id),
                and_(MemberMessage.from_user_id == other_user_id, MemberMessage.to_user_id == user_id),
            )
        )
        return self._newest_first(query).all()

    def mark_read(self, message: MemberMessage) -> MemberMessage:
        message.is_read = True
        self.db.commit()
        self.db.refresh(message)
        return message

    def count_distinct_contacts(
        self, user_id: int, since: Optional[datetime] = None, until: Optional[datetime] = None
    ) -> int:
        contact = case(
            (MemberMessage.from_user_id == user_id, MemberMessage.to_user_id),
            else_=MemberMessage.from_user_id,
        )
        query = self.db.query(func.count(func.distinct(contact))).filter(
            or_(MemberMessage.from_user_id == user_id, MemberMessage.to_user_id == user_id)
        )
        if since is not None:
            query = query.filter(MemberMessage.sent_at >= since)
        if until is not None:
            query = query.filter(MemberMessage.sent_at < until)
        return query.scalar() or 0
