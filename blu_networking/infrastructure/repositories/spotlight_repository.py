"""
SQLAlchemy Implementation of Member Spotlight Repository.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import joinedload

from blu_networking.domain.models.member_spotlight import MemberSpotlight
from blu_networking.domain.repositories.spotlight_repository import SpotlightRepository
from blu_networking.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemySpotlightRepository(SQLAlchemyRepository[MemberSpotlight], SpotlightRepository):
    """Spotlight repository; the featured user comes back in the same query."""

    def get_active(self, today: date) -> Optional[MemberSpotlight]:
        return (
            self.db.query(MemberSpotlight)
            .options(joinedload(MemberSpotlight.user))
            .filter(
                MemberSpotlight.active.is_(True),
                or_(MemberSpotlight.featured_until.is_(None), MemberSpotlight.featured_until >= today),
            )
            .order_by(MemberSpotlight.created_at.desc(), MemberSpotlight.id.desc())
            .first()
        )

    def list_all(self) -> List[MemberSpotlight]:
        return (
            self.db.query(MemberSpotlight)
            .options(joinedload(MemberSpotlight.user))
            .order_by(MemberSpotlight.created_at.desc(), MemberSpotlight.id.desc())
            .all()
        )
