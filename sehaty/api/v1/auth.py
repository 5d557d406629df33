from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...api.deps import get_current_user, get_current_user_token
from ...services.auth_service import AuthService
from ...schemas.auth import (
    UserLogin, UserRegister, AuthResponse, UserResponse, MeResponse,
    ChangePassword
)
from ...models.user import User

router = APIRouter(prefix="/auth", tags=["Authentication"])

@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserRegister,
    db: Session = Depends(get_db)
):
    """Register a new user."""
    auth_service = AuthService(db)
    return auth_service.register_user(user_data)

@router.post("/login", response_model=AuthResponse)
async def login(
    login_data: UserLogin,
    db: Session = Depends(get_db),
):
    """Authenticate user and return an access token."""
    auth_service = AuthService(db)
    return auth_service.authenticate_user(login_data)

@router.get("/me", response_model=MeResponse)
async def get_current_user_info(
    current_user: User = Depends(get_current_user)
):
    """Get current user information."""
    return MeResponse(user=UserResponse.model_validate(current_user))

@router.post("/change-password")
async def change_password(
    password_data: ChangePassword,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Change user password."""
    auth_service = AuthService(db)
    auth_service.change_password(
        current_user, password_data.current_password, password_data.new_password
    )

    return {"message": "Password changed successfully"}

@router.post("/verify-token")
async def verify_token_endpoint(
    token_payload = Depends(get_current_user_token)
):
    """Verify if token is valid."""
    return {
        "valid": True,
        "user_id": token_payload.user_id,
        "expires": token_payload.exp
    }
