"""
SQLAlchemy Implementation of Lead and Goal Repositories.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import func

from blu_networking.domain.models.lead import Lead
from blu_networking.domain.models.user import User
from blu_networking.domain.models.user_goal import UserGoal
from blu_networking.domain.repositories.lead_repository import GoalRepository, LeadRepository
from blu_networking.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyLeadRepository(SQLAlchemyRepository[Lead], LeadRepository):
    """Lead repository implementation using SQLAlchemy."""

    def list_by_user(self, user_id: int) -> List[Lead]:
        return (
            self.db.query(Lead)
            .filter(Lead.user_id == user_id)
            .order_by(Lead.created_at.desc(), Lead.id.desc())
            .all()
        )

    def count_by_user(
        self,
        user_id: int,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
        status: Optional[str] = None,
    ) -> int:
        query = self.db.query(func.count(Lead.id)).filter(Lead.user_id == user_id)
        if since is not None:
            query = query.filter(Lead.created_at >= since)
        if until is not None:
            query = query.filter(Lead.created_at < until)
        if status is not None:
            query = query.filter(Lead.status == status)
        return query.scalar() or 0

    def count_all(self) -> int:
        return self.db.query(func.count(Lead.id)).scalar() or 0

    def total_value_by_user(self, user_id: int) -> int:
        total = (
            self.db.query(func.coalesce(func.sum(Lead.value), 0))
            .filter(Lead.user_id == user_id)
            .scalar()
        )
        return int(total or 0)

    def average_value(self) -> float:
        avg = self.db.query(func.coalesce(func.avg(Lead.value), 0)).scalar()
        return round(float(avg or 0), 2)

    def _grouped_counts(self, column, user_id: int, since: Optional[datetime]) -> Dict[str, int]:
        query = self.db.query(column, func.count(Lead.id)).filter(Lead.user_id == user_id)
        if since is not None:
            query = query.filter(Lead.created_at >= since)
        rows = query.group_by(column).order_by(func.count(Lead.id).desc()).all()
        return {name: count for name, count in rows}

    def counts_by_type(self, user_id: int, since: Optional[datetime] = None) -> Dict[str, int]:
        return self._grouped_counts(Lead.type, user_id, since)

    def counts_by_status(self, user_id: int, since: Optional[datetime] = None) -> Dict[str, int]:
        return self._grouped_counts(Lead.status, user_id, since)

    def created_since(self, user_id: int, since: datetime) -> List[Lead]:
        return (
            self.db.query(Lead)
            .filter(Lead.user_id == user_id, Lead.created_at >= since)
            .all()
        )

    def due_for_follow_up(self, day: date) -> List[Lead]:
        return (
            self.db.query(Lead)
            .filter(Lead.follow_up_date == day)
            .order_by(Lead.user_id, Lead.id)
            .all()
        )

    def top_members(self, limit: int = 5, since: Optional[datetime] = None) -> List[Dict[str, Any]]:
        lead_value = func.coalesce(func.sum(Lead.value), 0)
        query = (
            self.db.query(
                User.full_name,
                User.profile_image,
                func.count(Lead.id).label("leads_generated"),
                lead_value.label("lead_value"),
            )
            .join(Lead, Lead.user_id == User.id)
        )
        if since is not None:
            query = query.filter(Lead.created_at >= since)
        rows = (
            query.group_by(User.id, User.full_name, User.profile_image)
            .order_by(lead_value.desc(), func.count(Lead.id).desc(), User.id)
            .limit(limit)
            .all()
        )
        return [
            {
                "name": row.full_name,
                "leads_generated": row.leads_generated,
                "lead_value": int(row.lead_value or 0),
                "avatar_url": row.profile_image,
            }
            for row in rows
        ]


class SQLAlchemyGoalRepository(SQLAlchemyRepository[UserGoal], GoalRepository):
    """Goal repository implementation using SQLAlchemy."""

    def current_for_user(self, user_id: int, today: date) -> Optional[UserGoal]:
        return (
            self.db.query(UserGoal)
            .filter(
                UserGoal.user_id == user_id,
                UserGoal.start_date <= today,
                UserGoal.end_date >= today,
            )
            .order_by(UserGoal.start_date.desc(), UserGoal.id.desc())
            .first()
        )
