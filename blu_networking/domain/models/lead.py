"""Lead domain model - a tracked business contact owned by one member."""

from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey
from sqlalchemy.sql import func

from blu_networking.infrastructure.database import Base


LEAD_TYPES = ["Referral", "Event Connection", "Direct Outreach", "Online", "Other"]
LEAD_STATUSES = ["Initial Contact", "Follow-up Scheduled", "Needs Follow-up", "Converted", "Lost"]
CONVERTED_STATUS = "Converted"


class Lead(Base):
    __tablename__ = "leads"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    company = Column(String(200), nullable=False)
    email = Column(String(255), nullable=True)
    phone_number = Column(String(30), nullable=True)
    notes = Column(Text, nullable=True)
    type = Column(String(100), nullable=False, index=True)  # see LEAD_TYPES
    status = Column(String(100), nullable=False, index=True)  # see LEAD_STATUSES
    value = Column(Integer, nullable=True)  # estimated value in dollars
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    follow_up_date = Column(Date, nullable=True, index=True)

    def __repr__(self):
        return f"<Lead {self.name} - {self.status}>"
