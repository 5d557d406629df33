from typing import List, Optional
from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...api.deps import get_current_user, get_doctor_user
from ...models.appointment import AppointmentStatus
from ...models.user import User
from ...schemas.appointment import (
    AppointmentCancel, AppointmentResponse, AppointmentStatusUpdate,
    CancellationResponse
)
from ...services.appointment_service import AppointmentService

router = APIRouter(prefix="/appointments", tags=["Appointments"])

@router.get("", response_model=List[AppointmentResponse])
async def list_appointments(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Appointments where the caller is the patient, or the doctor for doctors."""
    return AppointmentService(db).list_for_user(current_user)

@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(
    appointment_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return AppointmentService(db).get_for_user(current_user, appointment_id)

@router.post("/cancel/{appointment_id}", response_model=CancellationResponse)
async def cancel_appointment(
    appointment_id: int,
    cancellation: Optional[AppointmentCancel] = Body(None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Cancel an appointment.

    Patients cancelling less than 24 hours ahead are charged the late
    cancellation fee.
    """
    reason = cancellation.cancellation_reason if cancellation else None
    appointment, fee = AppointmentService(db).cancel(current_user, appointment_id, reason)

    return CancellationResponse(
        message="Appointment cancelled successfully",
        appointment=AppointmentResponse.model_validate(appointment),
        cancellation_fee=fee,
    )

@router.patch("/{appointment_id}/status", response_model=AppointmentResponse)
async def update_appointment_status(
    appointment_id: int,
    update: AppointmentStatusUpdate,
    current_user: User = Depends(get_doctor_user),
    db: Session = Depends(get_db)
):
    """Move an appointment to in-progress or completed (assigned doctor only)."""
    return AppointmentService(db).update_status(
        current_user, appointment_id, AppointmentStatus(update.status)
    )
