from datetime import datetime, timezone
from typing import Annotated
from pydantic import AfterValidator

def to_naive_utc(value: datetime) -> datetime:
    """Store datetimes as naive UTC, the way the database columns hold them."""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value

UTCDatetime = Annotated[datetime, AfterValidator(to_naive_utc)]
