from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...api.deps import get_current_user
from ...models.user import User
from ...schemas.complaint import ComplaintCreate, ComplaintResponse
from ...services.complaint_service import ComplaintService

router = APIRouter(prefix="/complaints", tags=["Complaints"])

@router.post("", response_model=ComplaintResponse, status_code=status.HTTP_201_CREATED)
async def submit_complaint(
    complaint: ComplaintCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return ComplaintService(db).submit(current_user, complaint)

@router.get("/mine", response_model=List[ComplaintResponse])
async def my_complaints(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return ComplaintService(db).list_for_user(current_user)
