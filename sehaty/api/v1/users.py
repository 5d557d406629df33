from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...api.deps import get_current_user, get_patient_user
from ...models.user import User
from ...schemas.appointment import AppointmentCreate, AppointmentResponse
from ...schemas.auth import UserResponse
from ...schemas.dashboard import DashboardResponse
from ...schemas.notification import NotificationResponse
from ...schemas.prescription import (
    PrescriptionCreate, PrescriptionResponse, PrescriptionStatusUpdate
)
from ...schemas.user import (
    HealthRecordCreate, HealthRecordResponse, ProfileUpdate, ProviderSummary
)
from ...services.appointment_service import AppointmentService
from ...services.notification_service import NotificationService
from ...services.prescription_service import PrescriptionService
from ...services.user_service import UserService

router = APIRouter(prefix="/user", tags=["User"])

@router.get("/profile", response_model=UserResponse)
async def get_profile(current_user: User = Depends(get_current_user)):
    return current_user

@router.put("/profile", response_model=UserResponse)
async def update_profile(
    profile: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update the caller's profile fields."""
    return UserService(db).update_profile(current_user, profile)

@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Aggregated counts and short lists for the dashboard."""
    return UserService(db).dashboard(current_user)

@router.get("/top-clinics", response_model=List[ProviderSummary])
async def get_top_clinics(db: Session = Depends(get_db)):
    return UserService(db).top_clinics()

# Appointments
@router.post("/appointments", response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    appointment: AppointmentCreate,
    current_user: User = Depends(get_patient_user),
    db: Session = Depends(get_db)
):
    """Book an appointment with a doctor."""
    return AppointmentService(db).book(current_user, appointment)

# Prescriptions
@router.get("/prescriptions", response_model=List[PrescriptionResponse])
async def get_prescriptions(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return PrescriptionService(db).list_for_user(current_user)

@router.post("/prescriptions", response_model=PrescriptionResponse, status_code=status.HTTP_201_CREATED)
async def add_prescription(
    prescription: PrescriptionCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return PrescriptionService(db).create(current_user, prescription)

@router.patch("/prescriptions/{prescription_id}", response_model=PrescriptionResponse)
async def update_prescription_status(
    prescription_id: int,
    update: PrescriptionStatusUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Overwrite a prescription's status."""
    return PrescriptionService(db).update_status(current_user, prescription_id, update.status)

# Health records
@router.get("/health-records", response_model=List[HealthRecordResponse])
async def get_health_records(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return UserService(db).list_health_records(current_user)

@router.post("/health-records", response_model=HealthRecordResponse, status_code=status.HTTP_201_CREATED)
async def add_health_record(
    record: HealthRecordCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return UserService(db).add_health_record(current_user, record)

# Notifications
@router.get("/notifications", response_model=List[NotificationResponse])
async def get_notifications(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """The 20 most recent notifications, newest first."""
    return NotificationService(db).list_for_user(current_user)

@router.patch("/notifications/read-all")
async def mark_all_notifications_read(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    updated = NotificationService(db).mark_all_read(current_user)
    return {"message": "All notifications marked as read", "updated": updated}

@router.patch("/notifications/{notification_id}/read")
async def mark_notification_read(
    notification_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    NotificationService(db).mark_read(current_user, notification_id)
    return {"message": "Notification marked as read"}
