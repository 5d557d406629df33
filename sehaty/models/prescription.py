from datetime import datetime
from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Text, Enum as SQLEnum
from sqlalchemy.orm import relationship
import enum

from ..core.database import Base

class PrescriptionFrequency(str, enum.Enum):
    ONCE_DAILY = "once_daily"
    TWICE_DAILY = "twice_daily"
    THREE_TIMES_DAILY = "three_times_daily"
    FOUR_TIMES_DAILY = "four_times_daily"
    AS_NEEDED = "as_needed"

class PrescriptionStatus(str, enum.Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

class Prescription(Base):
    __tablename__ = "prescriptions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    medication = Column(String(255), nullable=False)
    dosage = Column(String(100), nullable=False)
    frequency = Column(SQLEnum(PrescriptionFrequency, values_callable=lambda e: [m.value for m in e]), nullable=False)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    status = Column(SQLEnum(PrescriptionStatus, values_callable=lambda e: [m.value for m in e]), default=PrescriptionStatus.ACTIVE, nullable=False)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="prescriptions")

    def __repr__(self):
        return f"<Prescription(id={self.id}, user_id={self.user_id}, medication='{self.medication}')>"
