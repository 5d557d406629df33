from datetime import datetime
from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Enum as SQLEnum
from sqlalchemy.orm import relationship
import enum

from ..core.database import Base

class ActivityType(str, enum.Enum):
    APPOINTMENT = "appointment"
    PRESCRIPTION = "prescription"
    RECORD = "record"
    LOGIN = "login"

class Activity(Base):
    """One line of a user's recent-activity log."""
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    type = Column(SQLEnum(ActivityType, values_callable=lambda e: [m.value for m in e]), nullable=False)
    description = Column(String(255), nullable=False)
    date = Column(DateTime, default=datetime.utcnow, nullable=False)
    related_id = Column(Integer, nullable=True)

    user = relationship("User", back_populates="recent_activities")

    def __repr__(self):
        return f"<Activity(id={self.id}, user_id={self.user_id}, type='{self.type}')>"
