from typing import List
import logging

from sqlalchemy.orm import Session

from ..models.complaint import Complaint
from ..models.user import User
from ..schemas.complaint import ComplaintCreate

logger = logging.getLogger(__name__)

class ComplaintService:
    def __init__(self, db: Session):
        self.db = db

    def submit(self, user: User, data: ComplaintCreate) -> Complaint:
        complaint = Complaint(
            user_id=user.id,
            title=data.title.strip(),
            description=data.description.strip(),
        )
        self.db.add(complaint)
        self.db.commit()
        self.db.refresh(complaint)

        logger.info(f"Complaint {complaint.id} submitted by user {user.id}")
        return complaint

    def list_for_user(self, user: User) -> List[Complaint]:
        return self.db.query(Complaint).filter(
            Complaint.user_id == user.id
        ).order_by(Complaint.created_at.desc(), Complaint.id.desc()).all()
