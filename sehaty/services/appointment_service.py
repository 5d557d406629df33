from datetime import datetime
from typing import List, Optional, Tuple
import logging

from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from ..core.config import settings
from ..core.security import AuthorizationError, UserRole
from ..models.activity import Activity, ActivityType
from ..models.appointment import Appointment, AppointmentStatus
from ..models.user import User
from ..schemas.appointment import AppointmentCreate
from .notification_service import NotificationService

logger = logging.getLogger(__name__)

LATE_CANCELLATION_NOTE = "Late cancellation fee applied (less than 24 hours notice)."
NO_REASON = "No reason provided"

def check_cancellable(appointment: Appointment, role: UserRole) -> None:
    """Raise if ``role`` may not move ``appointment`` to cancelled."""
    if appointment.status == AppointmentStatus.CANCELLED:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="This appointment is already cancelled"
        )

    if appointment.status == AppointmentStatus.COMPLETED:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot cancel a completed appointment"
        )

    if appointment.status == AppointmentStatus.IN_PROGRESS and role not in (UserRole.DOCTOR, UserRole.ADMIN):
        raise AuthorizationError("Patients cannot cancel an in-progress appointment")

def cancellation_fee(role: UserRole, scheduled_at: datetime, now: Optional[datetime] = None) -> Tuple[float, str]:
    """Fee and note owed for cancelling an appointment at ``scheduled_at``."""
    now = now or datetime.utcnow()
    hours_remaining = (scheduled_at - now).total_seconds() / 3600

    if role == UserRole.PATIENT and hours_remaining < settings.LATE_CANCELLATION_HOURS:
        return settings.CANCELLATION_FEE, LATE_CANCELLATION_NOTE
    return 0.0, ""

class AppointmentService:
    def __init__(self, db: Session):
        self.db = db
        self.notifications = NotificationService(db)

    def book(self, patient: User, data: AppointmentCreate) -> Appointment:
        """Book an appointment for ``patient``.

        Slots are not checked for overlap, so identical bookings for the same
        doctor, date and time all succeed.
        """
        if patient.role != UserRole.PATIENT:
            raise AuthorizationError("Only patients can book appointments")

        doctor = self.db.query(User).filter(
            User.id == data.doctor_id,
            User.role == UserRole.DOCTOR
        ).first()
        if not doctor:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Doctor not found"
            )

        appointment = Appointment(
            patient_id=patient.id,
            doctor_id=doctor.id,
            date=data.date,
            time=data.time,
            status=AppointmentStatus.SCHEDULED,
            notes=data.notes,
        )
        self.db.add(appointment)

        self.db.add(Activity(
            user_id=patient.id,
            type=ActivityType.APPOINTMENT,
            description="New appointment scheduled",
            related_id=doctor.id,
        ))

        when = appointment.scheduled_at.strftime("%Y-%m-%d %H:%M")
        self.notifications.create(
            patient.id,
            "Appointment Scheduled",
            f"Your appointment with Dr. {doctor.name} is scheduled for {when}",
            "appointment",
        )
        self.notifications.create(
            doctor.id,
            "New Appointment",
            f"{patient.name} booked an appointment for {when}",
            "appointment",
        )

        self.db.commit()
        self.db.refresh(appointment)

        logger.info(f"Appointment {appointment.id} booked by patient {patient.id} with doctor {doctor.id}")
        return appointment

    def list_for_user(self, user: User) -> List[Appointment]:
        query = self.db.query(Appointment)
        if user.role == UserRole.DOCTOR:
            query = query.filter(Appointment.doctor_id == user.id)
        elif user.role != UserRole.ADMIN:
            query = query.filter(Appointment.patient_id == user.id)
        return query.order_by(Appointment.date.asc(), Appointment.id.asc()).all()

    def get_for_user(self, user: User, appointment_id: int) -> Appointment:
        appointment = self._get(appointment_id)
        if user.role != UserRole.ADMIN and user.id not in (appointment.patient_id, appointment.doctor_id):
            raise AuthorizationError("Not authorized to view this appointment")
        return appointment

    def update_status(self, doctor: User, appointment_id: int, new_status: AppointmentStatus) -> Appointment:
        appointment = self._get(appointment_id)

        if doctor.role != UserRole.DOCTOR or appointment.doctor_id != doctor.id:
            raise AuthorizationError("Not authorized to update appointment status")

        if appointment.status == AppointmentStatus.CANCELLED:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Cannot update a cancelled appointment"
            )

        appointment.status = new_status
        self.db.commit()
        self.db.refresh(appointment)
        return appointment

    def cancel(self, actor: User, appointment_id: int, reason: Optional[str] = None) -> Tuple[Appointment, float]:
        """Cancel an appointment, applying the late-cancellation fee policy."""
        appointment = self._get(appointment_id)
        self._check_actor(actor, appointment)
        check_cancellable(appointment, actor.role)

        fee, fee_note = cancellation_fee(actor.role, appointment.scheduled_at)
        reason = reason or NO_REASON
        now = datetime.utcnow()

        appointment.status = AppointmentStatus.CANCELLED
        appointment.notes = (
            f"{appointment.notes}\n\nCancellation: {reason}" if appointment.notes
            else f"Cancellation: {reason}"
        )
        appointment.cancelled_by = actor.role.value
        appointment.cancelled_by_id = actor.id
        appointment.cancelled_at = now
        appointment.cancellation_reason = reason
        appointment.cancellation_fee = fee
        appointment.cancellation_notes = fee_note

        counterpart_id = appointment.doctor_id if actor.id == appointment.patient_id else appointment.patient_id
        self.notifications.create(
            counterpart_id,
            "Appointment Cancelled",
            f"The appointment on {appointment.scheduled_at.strftime('%Y-%m-%d %H:%M')} was cancelled: {reason}",
            "appointment",
        )

        self.db.commit()
        self.db.refresh(appointment)

        logger.info(
            f"Appointment {appointment.id} cancelled by {actor.role.value} {actor.id} "
            f"(fee: {fee})"
        )
        return appointment, fee

    def _check_actor(self, actor: User, appointment: Appointment) -> None:
        if actor.role == UserRole.ADMIN:
            return
        if actor.role == UserRole.PATIENT and appointment.patient_id == actor.id:
            return
        if actor.role == UserRole.DOCTOR and appointment.doctor_id == actor.id:
            return
        raise AuthorizationError("You do not have permission to cancel this appointment")

    def _get(self, appointment_id: int) -> Appointment:
        appointment = self.db.query(Appointment).filter(Appointment.id == appointment_id).first()
        if not appointment:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Appointment not found"
            )
        return appointment
