from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field

from ..core.security import UserRole
from ._utils import UTCDatetime

class UserRegister(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8)
    role: Literal["patient", "doctor", "clinic"] = "patient"

    phone_number: Optional[str] = None
    address: Optional[str] = None

    # Patient
    date_of_birth: Optional[UTCDatetime] = None
    gender: Optional[str] = None
    insurance_provider: Optional[str] = None

    # Doctor / clinic
    specialty: Optional[str] = None
    location: Optional[str] = None
    license_number: Optional[str] = None
    contact_info: Optional[str] = None
    clinic_name: Optional[str] = None
    website: Optional[str] = None

class UserLogin(BaseModel):
    email: EmailStr
    password: str

class ChangePassword(BaseModel):
    current_password: str
    new_password: str = Field(..., min_length=8)

class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: EmailStr
    role: UserRole
    is_active: bool = True
    phone_number: Optional[str] = None
    address: Optional[str] = None
    date_of_birth: Optional[datetime] = None
    gender: Optional[str] = None
    insurance_provider: Optional[str] = None
    specialty: Optional[str] = None
    location: Optional[str] = None
    license_number: Optional[str] = None
    contact_info: Optional[str] = None
    clinic_name: Optional[str] = None
    website: Optional[str] = None
    bio: Optional[str] = None
    rating: Optional[float] = None
    created_at: Optional[datetime] = None

class AuthResponse(BaseModel):
    user: UserResponse
    token: str
    token_type: str = "bearer"

class MeResponse(BaseModel):
    user: UserResponse
