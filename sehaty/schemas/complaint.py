from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from ..models.complaint import ComplaintStatus

class ComplaintCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)

class ComplaintResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    description: str
    status: ComplaintStatus
    created_at: datetime
