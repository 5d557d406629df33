from .user import User
from .appointment import Appointment, AppointmentStatus
from .prescription import Prescription, PrescriptionFrequency, PrescriptionStatus
from .health_record import HealthRecord, HealthRecordType
from .activity import Activity, ActivityType
from .notification import Notification
from .complaint import Complaint, ComplaintStatus

__all__ = [
    "User",
    "Appointment",
    "AppointmentStatus",
    "Prescription",
    "PrescriptionFrequency",
    "PrescriptionStatus",
    "HealthRecord",
    "HealthRecordType",
    "Activity",
    "ActivityType",
    "Notification",
    "Complaint",
    "ComplaintStatus",
]
