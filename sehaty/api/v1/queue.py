from typing import Optional
from fastapi import APIRouter, Query

from ...schemas.queue import QueueAdvanceRequest, QueueAdvanceResponse, QueuePreview
from ...services import queue_display

router = APIRouter(prefix="/queue", tags=["Queue"])

@router.get("/preview", response_model=QueuePreview)
async def preview_queue(
    current_number: int = Query(..., ge=0),
    total_in_queue: int = Query(..., ge=0, le=500),
    estimated_wait_time: int = Query(..., ge=0),
    user_position: Optional[int] = None,
    show_next_available: bool = True,
):
    """Synthetic queue built from the numbers given. Nothing is stored."""
    return QueuePreview(
        current_number=current_number,
        total_in_queue=total_in_queue,
        estimated_wait_time=estimated_wait_time,
        people=queue_display.build_preview(
            current_number,
            total_in_queue,
            estimated_wait_time,
            user_position=user_position,
            show_next_available=show_next_available,
        ),
    )

@router.post("/advance", response_model=QueueAdvanceResponse)
async def advance_queue(request: QueueAdvanceRequest):
    """Move a client-held queue forward by one tick."""
    queue = queue_display.advance(request.queue)
    position = None
    if request.patient_name:
        position = queue_display.find_position(queue, request.patient_name)
    return QueueAdvanceResponse(queue=queue, position=position)
