from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..models.prescription import PrescriptionFrequency, PrescriptionStatus
from ._utils import UTCDatetime

class PrescriptionCreate(BaseModel):
    medication: str = Field(..., min_length=1, max_length=255)
    dosage: str = Field(..., min_length=1, max_length=100)
    frequency: PrescriptionFrequency
    start_date: UTCDatetime
    end_date: UTCDatetime
    status: PrescriptionStatus = PrescriptionStatus.ACTIVE
    notes: Optional[str] = None

    @model_validator(mode="after")
    def check_date_range(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

class PrescriptionStatusUpdate(BaseModel):
    status: PrescriptionStatus

class PrescriptionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    medication: str
    dosage: str
    frequency: PrescriptionFrequency
    start_date: datetime
    end_date: datetime
    status: PrescriptionStatus
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
