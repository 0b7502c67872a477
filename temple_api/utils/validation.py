"""Validation utilities."""
from pathlib import Path

from fastapi import HTTPException


def validate_id(name: str, value: str) -> str:
    """Validate ID string (no path traversal)."""
    if not isinstance(value, str):
        raise HTTPException(status_code=400, detail=f"{name} is required")
    cleaned = value.strip()
    if not cleaned:
        raise HTTPException(status_code=400, detail=f"{name} is required")
    if Path(cleaned).name != cleaned or "/" in cleaned or "\\" in cleaned:
        raise HTTPException(status_code=400, detail=f"Invalid {name}")
    return cleaned


def validate_page(offset: int, limit: int, max_limit: int = 50) -> tuple[int, int]:
    """Validate pagination window for content listings."""
    if offset < 0:
        raise HTTPException(status_code=400, detail="offset must be non-negative")
    if limit < 1 or limit > max_limit:
        raise HTTPException(
            status_code=400, detail=f"limit must be between 1 and {max_limit}"
        )
    return offset, limit
