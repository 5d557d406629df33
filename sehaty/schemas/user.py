from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.activity import ActivityType
from ..models.health_record import HealthRecordType
from ._utils import UTCDatetime

class ProfileUpdate(BaseModel):
    """Editable profile fields. Email and role are fixed at registration."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    phone_number: Optional[str] = None
    address: Optional[str] = None
    date_of_birth: Optional[UTCDatetime] = None
    gender: Optional[str] = None
    insurance_provider: Optional[str] = None
    specialty: Optional[str] = None
    location: Optional[str] = None
    license_number: Optional[str] = None
    contact_info: Optional[str] = None
    clinic_name: Optional[str] = None
    website: Optional[str] = None
    bio: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value):
        # Name may be left out but never cleared
        if value is None or not value.strip():
            raise ValueError("Name cannot be empty")
        return value.strip()

class ProviderSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    specialty: Optional[str] = None
    location: Optional[str] = None
    clinic_name: Optional[str] = None
    bio: Optional[str] = None
    rating: Optional[float] = None

class DoctorListResponse(BaseModel):
    doctors: List[ProviderSummary]
    total: int
    page: int
    pages: int

class HealthRecordCreate(BaseModel):
    type: HealthRecordType
    date: UTCDatetime
    provider: Optional[str] = None
    description: Optional[str] = None
    attachments: List[str] = []

class HealthRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    type: HealthRecordType
    date: datetime
    provider: Optional[str] = None
    description: Optional[str] = None
    attachments: List[str] = []

class ActivityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    type: ActivityType
    description: str
    date: datetime
    related_id: Optional[int] = None
