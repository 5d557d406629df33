from typing import List
from pydantic import BaseModel

from .appointment import AppointmentResponse
from .prescription import PrescriptionResponse
from .user import ActivityResponse, HealthRecordResponse

class AppointmentSummary(BaseModel):
    total: int
    upcoming: int
    list: List[AppointmentResponse]

class PrescriptionSummary(BaseModel):
    total: int
    active: int
    list: List[PrescriptionResponse]

class HealthRecordSummary(BaseModel):
    total: int
    recent: List[HealthRecordResponse]

class DashboardResponse(BaseModel):
    appointments: AppointmentSummary
    prescriptions: PrescriptionSummary
    health_records: HealthRecordSummary
    recent_activities: List[ActivityResponse]
