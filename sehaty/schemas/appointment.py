from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..models.appointment import AppointmentStatus, parse_clock
from ._utils import to_naive_utc

class AppointmentCreate(BaseModel):
    doctor_id: int
    date: datetime
    time: Optional[str] = Field(None, max_length=20)
    notes: Optional[str] = None

    @model_validator(mode="after")
    def normalise_moment(self):
        """Read an HH:MM ``time`` in the offset ``date`` was sent with, then keep both in UTC."""
        if self.date.tzinfo is None:
            return self

        clock = parse_clock(self.time)
        if clock is None:
            self.date = to_naive_utc(self.date)
            return self

        local = datetime.combine(self.date.date(), clock, tzinfo=self.date.tzinfo)
        self.date = to_naive_utc(local)
        self.time = self.date.strftime("%H:%M")
        return self

class AppointmentCancel(BaseModel):
    cancellation_reason: Optional[str] = Field(None, max_length=255)

class AppointmentStatusUpdate(BaseModel):
    status: Literal["in-progress", "completed"]

class AppointmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    patient_id: int
    doctor_id: int
    date: datetime
    time: Optional[str] = None
    status: AppointmentStatus
    notes: Optional[str] = None
    cancelled_by: Optional[str] = None
    cancelled_by_id: Optional[int] = None
    cancelled_at: Optional[datetime] = None
    cancellation_reason: Optional[str] = None
    cancellation_fee: float = 0.0
    cancellation_notes: Optional[str] = None

class CancellationResponse(BaseModel):
    message: str
    appointment: AppointmentResponse
    cancellation_fee: float
