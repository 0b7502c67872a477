"""Utility modules."""
from temple_api.utils.time_utils import parse_iso_timestamp, utc_now
from temple_api.utils.validation import validate_id, validate_page

__all__ = [
    "parse_iso_timestamp",
    "utc_now",
    "validate_id",
    "validate_page",
]
