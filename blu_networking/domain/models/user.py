"""User domain model - maps to the 'users' table."""

import enum

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, Enum
from sqlalchemy.sql import func

from blu_networking.infrastructure.database import Base


class UserLevel(str, enum.Enum):
    """Three-tier role. Members < board members < executive board."""

    MEMBER = "member"
    BOARD_MEMBER = "board_member"
    EXECUTIVE_BOARD = "executive_board"

    @property
    def rank(self) -> int:
        return _LEVEL_RANK[self]

    def at_least(self, other: "UserLevel") -> bool:
        return self.rank >= other.rank


_LEVEL_RANK = {
    UserLevel.MEMBER: 0,
    UserLevel.BOARD_MEMBER: 1,
    UserLevel.EXECUTIVE_BOARD: 2,
}


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(200), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    company = Column(String(200), nullable=False)
    title = Column(String(200), nullable=False)
    bio = Column(Text, nullable=True)
    industry = Column(String(200), nullable=True)
    expertise = Column(Text, nullable=True)
    profile_image = Column(String(500), nullable=True)
    is_admin = Column(Boolean, default=False, nullable=False)  # derived from user_level
    user_level = Column(
        Enum(UserLevel, native_enum=False, length=32, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=UserLevel.MEMBER,
    )
    chapter_id = Column(Integer, ForeignKey("chapters.id"), nullable=True, index=True)
    phone_number = Column(String(30), nullable=True)
    joined_at = Column(DateTime(timezone=True), server_default=func.now())

    def has_level(self, level: UserLevel) -> bool:
        return UserLevel(self.user_level).at_least(level)

    def __repr__(self):
        return f"<User {self.username}>"
