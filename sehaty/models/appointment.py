from datetime import datetime
from typing import Optional
from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Float, Text, Enum as SQLEnum
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import enum

from ..core.database import Base

def parse_clock(value: Optional[str]):
    """The ``datetime.time`` of an HH:MM string, or None for free text."""
    if not value:
        return None
    try:
        return datetime.strptime(value.strip(), "%H:%M").time()
    except ValueError:
        return None

class AppointmentStatus(str, enum.Enum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, index=True)

    # Relationships
    patient_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    doctor_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Appointment details
    date = Column(DateTime, nullable=False, index=True)
    time = Column(String(20), nullable=True)
    status = Column(
        SQLEnum(AppointmentStatus, values_callable=lambda e: [m.value for m in e]),
        default=AppointmentStatus.SCHEDULED,
        nullable=False,
    )
    notes = Column(Text, nullable=True)

    # Cancellation details
    cancelled_by = Column(String(20), nullable=True)
    cancelled_by_id = Column(Integer, nullable=True)
    cancelled_at = Column(DateTime, nullable=True)
    cancellation_reason = Column(String(255), nullable=True)
    cancellation_fee = Column(Float, default=0.0)
    cancellation_notes = Column(String(255), nullable=True)

    # Tracking
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    patient = relationship("User", foreign_keys=[patient_id], back_populates="appointments")
    doctor = relationship("User", foreign_keys=[doctor_id], back_populates="doctor_appointments")

    @property
    def scheduled_at(self) -> datetime:
        """The appointment moment: ``date`` with ``time`` applied when it reads as HH:MM."""
        clock = parse_clock(self.time)
        if clock is None:
            return self.date
        return datetime.combine(self.date.date(), clock)

    def __repr__(self):
        return f"<Appointment(id={self.id}, patient_id={self.patient_id}, doctor_id={self.doctor_id}, date='{self.date}')>"
