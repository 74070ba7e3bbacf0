"""Board meeting minutes - drafted by the board, published to the chapter."""

from sqlalchemy import Column, Integer, String, Text, Boolean, Date, DateTime, ForeignKey, JSON
from sqlalchemy.sql import func

from blu_networking.infrastructure.database import Base


class BoardMeetingMinutes(Base):
    __tablename__ = "board_meeting_minutes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(300), nullable=False)
    meeting_date = Column(Date, nullable=False, index=True)
    attendees = Column(JSON, nullable=False, default=list)  # list[str]
    agenda = Column(Text, nullable=True)
    minutes = Column(Text, nullable=False)
    action_items = Column(JSON, nullable=False, default=list)  # list[str]
    next_meeting_date = Column(Date, nullable=True)
    is_published = Column(Boolean, default=False, nullable=False)
    created_by_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    chapter_id = Column(Integer, ForeignKey("chapters.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<BoardMeetingMinutes {self.title} published={self.is_published}>"
