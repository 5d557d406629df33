"""
Simulated waiting-room queue.

Nothing here is persisted. The preview is derived entirely from the numbers
the caller supplies, and ``advance`` moves a caller-held queue forward by one
tick. Waits shrink by a fixed step, there is no service-time model.
"""
from typing import List, Optional

from ..schemas.queue import QueueItem, QueuePerson, QueuePosition

# Minutes between consecutive people in a preview
PREVIEW_WAIT_STEP = 5
# Minutes shaved off every waiting entry on each tick
ADVANCE_WAIT_STEP = 15
# Assumed wait for entries that never had an estimate
DEFAULT_WAIT = 30

def build_preview(
    current_number: int,
    total_in_queue: int,
    estimated_wait_time: int,
    user_position: Optional[int] = None,
    show_next_available: bool = True,
) -> List[QueuePerson]:
    """Generate the synthetic list of people ahead."""
    people = []
    user_in_queue = False

    for i in range(total_in_queue):
        position = current_number + i
        is_current_user = user_position == position
        if is_current_user:
            user_in_queue = True
        people.append(QueuePerson(
            id=f"person-{i}",
            name=f"Patient {position}",
            position=position,
            estimated_wait_time=max(0, estimated_wait_time - i * PREVIEW_WAIT_STEP),
            is_current_user=is_current_user,
        ))

    if show_next_available and not user_in_queue:
        people.append(QueuePerson(
            id="next-available",
            name="You (Next)",
            position=current_number + total_in_queue,
            estimated_wait_time=max(0, estimated_wait_time - total_in_queue * PREVIEW_WAIT_STEP),
            is_next_available=True,
        ))

    return people

def advance(queue: List[QueueItem]) -> List[QueueItem]:
    """Complete the current entry and promote the next one.

    The queue is returned unchanged when nobody is current or the current
    entry is already the last one.
    """
    current_index = next(
        (i for i, item in enumerate(queue) if item.status == "current"), None
    )
    if current_index is None or current_index == len(queue) - 1:
        return list(queue)

    advanced = [item.model_copy() for item in queue]
    advanced[current_index] = advanced[current_index].model_copy(update={"status": "completed"})
    advanced[current_index + 1] = advanced[current_index + 1].model_copy(
        update={"status": "current", "estimated_wait": 0}
    )

    for i in range(current_index + 2, len(advanced)):
        wait = advanced[i].estimated_wait
        if wait is None:
            wait = DEFAULT_WAIT
        advanced[i] = advanced[i].model_copy(
            update={"estimated_wait": max(0, wait - ADVANCE_WAIT_STEP)}
        )

    return advanced

def find_position(queue: List[QueueItem], patient_name: str) -> Optional[QueuePosition]:
    """Where ``patient_name`` stands relative to the current entry."""
    user_index = next(
        (i for i, item in enumerate(queue) if item.patient_name == patient_name), None
    )
    if user_index is None:
        return None

    entry = queue[user_index]
    if entry.status == "current":
        return QueuePosition(position="current", wait=0)
    if entry.status == "waiting":
        current_index = next(
            (i for i, item in enumerate(queue) if item.status == "current"), -1
        )
        return QueuePosition(
            position=user_index - current_index,
            wait=entry.estimated_wait or 0,
        )
    return QueuePosition(position="completed", wait=0)
