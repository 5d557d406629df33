from typing import List
import logging

from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from ..core.security import AuthorizationError
from ..models.activity import Activity, ActivityType
from ..models.prescription import Prescription, PrescriptionStatus
from ..models.user import User
from ..schemas.prescription import PrescriptionCreate

logger = logging.getLogger(__name__)

class PrescriptionService:
    def __init__(self, db: Session):
        self.db = db

    def list_for_user(self, user: User) -> List[Prescription]:
        return self.db.query(Prescription).filter(
            Prescription.user_id == user.id
        ).order_by(Prescription.created_at.desc(), Prescription.id.desc()).all()

    def create(self, user: User, data: PrescriptionCreate) -> Prescription:
        prescription = Prescription(user_id=user.id, **data.model_dump())
        self.db.add(prescription)
        # Flush so the activity entry can reference the new id
        self.db.flush()

        self.db.add(Activity(
            user_id=user.id,
            type=ActivityType.PRESCRIPTION,
            description=f"Added new prescription: {prescription.medication}",
            related_id=prescription.id,
        ))

        self.db.commit()
        self.db.refresh(prescription)

        logger.info(f"Prescription {prescription.id} added for user {user.id}")
        return prescription

    def update_status(self, user: User, prescription_id: int, new_status: PrescriptionStatus) -> Prescription:
        """Overwrite the status. Any status may replace any other."""
        prescription = self.db.query(Prescription).filter(
            Prescription.id == prescription_id
        ).first()

        if not prescription:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Prescription not found"
            )

        if prescription.user_id != user.id:
            raise AuthorizationError("Not authorized to update this prescription")

        prescription.status = new_status
        self.db.commit()
        self.db.refresh(prescription)
        return prescription
