"""Static site content endpoints."""
from fastapi import APIRouter

from payments import fest_event
from serialization import serialize_event, serialize_timings
from site_content import EVENING_SCHEDULE, FEST_PRIZES, MORNING_SCHEDULE

router = APIRouter(prefix="/api/site", tags=["site"])


@router.get("/darshan")
def darshan_timings() -> dict[str, object]:
    """Daily temple schedule."""
    return {
        "morning": serialize_timings(MORNING_SCHEDULE),
        "evening": serialize_timings(EVENING_SCHEDULE),
    }


@router.get("/fest")
def fest_details() -> dict[str, object]:
    """Festival details shown next to the booking form."""
    payload = serialize_event(fest_event())
    payload["prizes"] = list(FEST_PRIZES)
    return payload
