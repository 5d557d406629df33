from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...schemas.user import DoctorListResponse, ProviderSummary
from ...services.user_service import UserService

router = APIRouter(prefix="/doctors", tags=["Doctors"])

@router.get("", response_model=DoctorListResponse)
async def list_doctors(
    specialty: Optional[str] = None,
    search: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db)
):
    """Browse the doctor directory."""
    doctors, total, pages = UserService(db).search_doctors(
        specialty=specialty, search=search, page=page, limit=limit
    )
    return DoctorListResponse(
        doctors=[ProviderSummary.model_validate(d) for d in doctors],
        total=total,
        page=page,
        pages=pages,
    )

@router.get("/{doctor_id}", response_model=ProviderSummary)
async def get_doctor(doctor_id: int, db: Session = Depends(get_db)):
    return UserService(db).get_doctor(doctor_id)
