from typing import List, Optional
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from ..models.notification import Notification
from ..models.user import User

NOTIFICATION_LIMIT = 20

class NotificationService:
    def __init__(self, db: Session):
        self.db = db

    def create(self, user_id: int, title: str, message: Optional[str], type: str) -> Notification:
        """Queue a notification for a user. The caller commits."""
        notification = Notification(
            user_id=user_id,
            title=title,
            message=message,
            type=type,
            read=False,
        )
        self.db.add(notification)
        return notification

    def list_for_user(self, user: User) -> List[Notification]:
        return self.db.query(Notification).filter(
            Notification.user_id == user.id
        ).order_by(
            Notification.created_at.desc(), Notification.id.desc()
        ).limit(NOTIFICATION_LIMIT).all()

    def mark_read(self, user: User, notification_id: int) -> Notification:
        notification = self.db.query(Notification).filter(
            Notification.id == notification_id,
            Notification.user_id == user.id
        ).first()

        if not notification:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Notification not found"
            )

        notification.read = True
        self.db.commit()
        return notification

    def mark_all_read(self, user: User) -> int:
        updated = self.db.query(Notification).filter(
            Notification.user_id == user.id,
            Notification.read == False  # noqa: E712
        ).update({"read": True}, synchronize_session=False)
        self.db.commit()
        return updated
