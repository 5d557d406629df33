from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from datetime import datetime
import logging

from ..models.activity import Activity, ActivityType
from ..models.user import User
from ..core.security import (
    verify_password, get_password_hash, create_access_token, UserRole
)
from ..schemas.auth import UserLogin, UserRegister, AuthResponse, UserResponse

logger = logging.getLogger(__name__)

class AuthService:
    def __init__(self, db: Session):
        self.db = db

    def register_user(self, user_data: UserRegister) -> AuthResponse:
        """Register a new user and issue their first token."""
        # Check if user already exists
        existing_user = self.db.query(User).filter(
            User.email == user_data.email
        ).first()

        if existing_user:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email already registered"
            )

        profile = user_data.model_dump(exclude={"password", "role"})
        new_user = User(
            **profile,
            password_hash=get_password_hash(user_data.password),
            role=UserRole(user_data.role),
            is_active=True,
        )

        self.db.add(new_user)
        self.db.commit()
        self.db.refresh(new_user)

        logger.info(f"Registered {new_user.role.value} user {new_user.id}")

        return self._auth_response(new_user)

    def authenticate_user(self, login_data: UserLogin) -> AuthResponse:
        """Authenticate user and return a token."""
        user = self.db.query(User).filter(
            User.email == login_data.email
        ).first()

        # Inactive accounts get the same answer as bad credentials
        if not user or not user.is_active or not verify_password(login_data.password, user.password_hash):
            if user and not user.is_active:
                logger.warning(f"Login attempt on deactivated account {user.id}")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid email or password",
                headers={"WWW-Authenticate": "Bearer"},
            )

        user.last_login = datetime.utcnow()
        self.db.add(Activity(
            user_id=user.id,
            type=ActivityType.LOGIN,
            description="Logged in",
        ))
        self.db.commit()

        return self._auth_response(user)

    def change_password(self, user: User, current_password: str, new_password: str) -> None:
        if not verify_password(current_password, user.password_hash):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Current password is incorrect"
            )

        user.password_hash = get_password_hash(new_password)
        self.db.commit()

    @staticmethod
    def _auth_response(user: User) -> AuthResponse:
        return AuthResponse(
            user=UserResponse.model_validate(user),
            token=create_access_token(user.id),
        )
