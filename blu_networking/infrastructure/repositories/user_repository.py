"""
SQLAlchemy Implementation of User Repository.
"""

from typing import Any, Dict, List, Optional

import structlog
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from blu_networking.core.exceptions import BusinessRuleViolationException
from blu_networking.domain.models.user import User, UserLevel
from blu_networking.domain.repositories.user_repository import UserRepository
from blu_networking.infrastructure.repositories.base_repository import SQLAlchemyRepository

logger = structlog.get_logger(__name__)

DUPLICATE_ACCOUNT = "Username or email already exists"

# Never writable through the generic profile path
PROTECTED_FIELDS = {"id", "password", "password_hash", "is_admin", "joined_at", "user_level"}


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def get_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(func.lower(User.email) == email.lower()).first()

    def create(self, obj_in: Any) -> User:
        data = obj_in.model_dump(exclude_unset=True) if hasattr(obj_in, "model_dump") else dict(obj_in)
        level = UserLevel(data.get("user_level", UserLevel.MEMBER))
        data["user_level"] = level
        data["is_admin"] = level.at_least(UserLevel.BOARD_MEMBER)
        try:
            return super().create(data)
        except IntegrityError as exc:
            # Concurrent signup with the same username or email
            self.db.rollback()
            logger.warning("User creation rejected by constraint", error=str(exc.orig))
            raise BusinessRuleViolationException(DUPLICATE_ACCOUNT) from exc

    def update_profile(self, user: User, data: Dict[str, Any]) -> User:
        allowed = {key: value for key, value in data.items() if key not in PROTECTED_FIELDS}
        try:
            return self.update(user, allowed)
        except IntegrityError as exc:
            self.db.rollback()
            raise BusinessRuleViolationException("Email already exists") from exc

    def update_password(self, user: User, password_hash: str) -> User:
        user.password_hash = password_hash
        self.db.commit()
        self.db.refresh(user)
        return user

    def update_level(self, user: User, level: UserLevel) -> User:
        user.user_level = level
        user.is_admin = level.at_least(UserLevel.BOARD_MEMBER)
        self.db.commit()
        self.db.refresh(user)
        return user

    def list_all(self) -> List[User]:
        return self.db.query(User).order_by(User.full_name).all()

    def list_by_chapter(self, chapter_id: int) -> List[User]:
        return (
            self.db.query(User)
            .filter(User.chapter_id == chapter_id)
            .order_by(User.full_name)
            .all()
        )

    def emails_by_chapter(self, chapter_id: int) -> List[str]:
        rows = self.db.query(User.email).filter(User.chapter_id == chapter_id).all()
        return [row[0] for row in rows]

    def count(self) -> int:
        return self.db.query(func.count(User.id)).scalar() or 0
