"""Time utilities."""
from datetime import datetime, timezone


def utc_now() -> str:
    """Get current UTC timestamp as ISO string."""
    return datetime.now(timezone.utc).isoformat()


def parse_iso_timestamp(value: object) -> datetime | None:
    """Parse ISO timestamp or date string to an aware datetime (UTC if naive)."""
    if not isinstance(value, str):
        return None
    raw = value.strip()
    if not raw:
        return None
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def is_upcoming(event: dict[str, object], now: datetime | None = None) -> bool:
    """True when an event has not ended yet; undated events count as upcoming."""
    now = now or datetime.now(timezone.utc)
    ends = parse_iso_timestamp(event.get("endDate")) or parse_iso_timestamp(
        event.get("startDate")
    )
    return ends is None or ends >= now
