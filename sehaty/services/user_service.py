from datetime import datetime
from typing import List, Optional, Tuple
import math

from sqlalchemy import or_
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from ..core.security import UserRole
from ..models.activity import Activity, ActivityType
from ..models.appointment import AppointmentStatus
from ..models.health_record import HealthRecord
from ..models.prescription import PrescriptionStatus
from ..models.user import User
from ..schemas.dashboard import (
    AppointmentSummary, DashboardResponse, HealthRecordSummary, PrescriptionSummary
)
from ..schemas.appointment import AppointmentResponse
from ..schemas.prescription import PrescriptionResponse
from ..schemas.user import (
    ActivityResponse, HealthRecordCreate, HealthRecordResponse, ProfileUpdate
)

DASHBOARD_LIST_SIZE = 3
DASHBOARD_RECENT_SIZE = 5
TOP_CLINICS = 3

class UserService:
    def __init__(self, db: Session):
        self.db = db

    # Profile
    def update_profile(self, user: User, data: ProfileUpdate) -> User:
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(user, field, value)
        self.db.commit()
        self.db.refresh(user)
        return user

    # Dashboard
    def dashboard(self, user: User, now: Optional[datetime] = None) -> DashboardResponse:
        """Aggregate the user's appointments, prescriptions, records and activity."""
        now = now or datetime.utcnow()

        if user.role == UserRole.DOCTOR:
            appointments = list(user.doctor_appointments)
        else:
            appointments = list(user.appointments)

        upcoming = sorted(
            (
                a for a in appointments
                if a.status == AppointmentStatus.SCHEDULED and a.scheduled_at >= now
            ),
            key=lambda a: a.scheduled_at,
        )

        prescriptions = sorted(
            user.prescriptions,
            key=lambda p: (p.created_at or datetime.min, p.id),
            reverse=True,
        )
        active = [p for p in prescriptions if p.status == PrescriptionStatus.ACTIVE]

        records = sorted(user.health_records, key=lambda r: r.date, reverse=True)
        activities = sorted(
            user.recent_activities, key=lambda a: (a.date, a.id), reverse=True
        )

        return DashboardResponse(
            appointments=AppointmentSummary(
                total=len(appointments),
                upcoming=len(upcoming),
                list=[AppointmentResponse.model_validate(a) for a in upcoming[:DASHBOARD_LIST_SIZE]],
            ),
            prescriptions=PrescriptionSummary(
                total=len(prescriptions),
                active=len(active),
                list=[PrescriptionResponse.model_validate(p) for p in active[:DASHBOARD_LIST_SIZE]],
            ),
            health_records=HealthRecordSummary(
                total=len(records),
                recent=[HealthRecordResponse.model_validate(r) for r in records[:DASHBOARD_RECENT_SIZE]],
            ),
            recent_activities=[ActivityResponse.model_validate(a) for a in activities[:DASHBOARD_RECENT_SIZE]],
        )

    # Health records
    def list_health_records(self, user: User) -> List[HealthRecord]:
        return self.db.query(HealthRecord).filter(
            HealthRecord.user_id == user.id
        ).order_by(HealthRecord.date.desc(), HealthRecord.id.desc()).all()

    def add_health_record(self, user: User, data: HealthRecordCreate) -> HealthRecord:
        record = HealthRecord(user_id=user.id, **data.model_dump())
        self.db.add(record)
        self.db.add(Activity(
            user_id=user.id,
            type=ActivityType.RECORD,
            description="New health record added",
            related_id=user.id,
        ))
        self.db.commit()
        self.db.refresh(record)
        return record

    # Provider directory
    def top_clinics(self) -> List[User]:
        return self.db.query(User).filter(
            User.role == UserRole.CLINIC,
            User.is_active == True  # noqa: E712
        ).order_by(User.rating.desc(), User.id.asc()).limit(TOP_CLINICS).all()

    def search_doctors(
        self,
        specialty: Optional[str] = None,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 20,
    ) -> Tuple[List[User], int, int]:
        """Return one page of doctors, the total match count and the page count."""
        query = self.db.query(User).filter(
            User.role == UserRole.DOCTOR,
            User.is_active == True  # noqa: E712
        )

        if specialty:
            query = query.filter(User.specialty == specialty)

        if search:
            pattern = f"%{search}%"
            query = query.filter(or_(
                User.name.ilike(pattern),
                User.specialty.ilike(pattern),
                User.location.ilike(pattern),
            ))

        total = query.count()
        doctors = query.order_by(User.name.asc(), User.id.asc()).offset(
            (page - 1) * limit
        ).limit(limit).all()

        return doctors, total, math.ceil(total / limit) if total else 0

    def get_doctor(self, doctor_id: int) -> User:
        doctor = self.db.query(User).filter(
            User.id == doctor_id,
            User.role == UserRole.DOCTOR
        ).first()
        if not doctor:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Doctor not found"
            )
        return doctor
