from typing import List, Literal, Optional, Union
from pydantic import BaseModel, Field

class QueuePerson(BaseModel):
    id: str
    name: str
    position: int
    estimated_wait_time: int
    is_current_user: bool = False
    is_next_available: bool = False

class QueuePreview(BaseModel):
    current_number: int
    total_in_queue: int
    estimated_wait_time: int
    people: List[QueuePerson]

class QueueItem(BaseModel):
    id: int
    patient_name: str
    time: Optional[str] = None
    status: Literal["waiting", "current", "completed", "noShow"]
    estimated_wait: Optional[int] = Field(None, ge=0)

class QueuePosition(BaseModel):
    position: Union[int, Literal["current", "completed"]]
    wait: int

class QueueAdvanceRequest(BaseModel):
    queue: List[QueueItem]
    patient_name: Optional[str] = None

class QueueAdvanceResponse(BaseModel):
    queue: List[QueueItem]
    position: Optional[QueuePosition] = None
