"""Member spotlight - a time-bounded featured member."""

from sqlalchemy import Column, Integer, Text, Boolean, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from blu_networking.infrastructure.database import Base


class MemberSpotlight(Base):
    __tablename__ = "member_spotlights"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    description = Column(Text, nullable=False)
    achievements = Column(Text, nullable=True)
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    featured_until = Column(Date, nullable=True)

    user = relationship("User", lazy="joined")

    def __repr__(self):
        return f"<MemberSpotlight user={self.user_id} active={self.active}>"
