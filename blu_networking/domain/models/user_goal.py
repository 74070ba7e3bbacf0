"""Personal networking goals for a period."""

from sqlalchemy import Column, Integer, String, Date, ForeignKey

from blu_networking.infrastructure.database import Base


class UserGoal(Base):
    __tablename__ = "user_goals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    connections_goal = Column(Integer, default=0, nullable=False)
    connections_achieved = Column(Integer, default=0, nullable=False)
    leads_goal = Column(Integer, default=0, nullable=False)
    leads_achieved = Column(Integer, default=0, nullable=False)
    events_goal = Column(Integer, default=0, nullable=False)
    events_achieved = Column(Integer, default=0, nullable=False)
    follow_ups_goal = Column(Integer, default=0, nullable=False)
    follow_ups_achieved = Column(Integer, default=0, nullable=False)

    period = Column(String(50), nullable=False)  # Monthly, Quarterly, ...
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)

    def __repr__(self):
        return f"<UserGoal user={self.user_id} {self.start_date}..{self.end_date}>"
