"""Field-level validation for festival booking forms.

The validator never raises: malformed input is its normal domain and every
problem comes back as a message keyed by the camelCase field name.
"""
from __future__ import annotations

import math
import re
from typing import Any, Mapping

from models import BookingFormData

VALIDATION_MESSAGES = {
    "required": "This field is required",
    "invalidEmail": "Please enter a valid email address",
    "invalidPhone": "Please enter a valid phone number (10 digits)",
    "invalidTicketCount": "Please select 1-10 tickets",
    "nameTooShort": "Name must be at least 2 characters long",
    "nameTooLong": "Name must be less than 100 characters",
    "specialRequestsTooLong": "Special requests must be less than 500 characters",
}

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100  # exclusive
MIN_TICKETS = 1
MAX_TICKETS = 10
SPECIAL_REQUESTS_MAX_LENGTH = 500

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_PHONE_RE = re.compile(r"[6-9][0-9]{9}")
_WHITESPACE_RE = re.compile(r"\s+")


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def is_valid_email(email: str) -> bool:
    return _EMAIL_RE.fullmatch(email.strip()) is not None


def is_valid_phone(phone: str) -> bool:
    """Indian mobile number: 10 digits starting with 6-9, whitespace ignored."""
    return _PHONE_RE.fullmatch(_WHITESPACE_RE.sub("", phone)) is not None


def is_valid_name(name: str) -> bool:
    return NAME_MIN_LENGTH <= len(name.strip()) < NAME_MAX_LENGTH


def is_valid_ticket_count(count: Any) -> bool:
    if isinstance(count, bool):
        return False
    if isinstance(count, float):
        if not count.is_integer():
            return False
        count = int(count)
    if not isinstance(count, int):
        return False
    return MIN_TICKETS <= count <= MAX_TICKETS


def _ticket_count_missing(count: Any) -> bool:
    if count is None or count == "":
        return True
    if isinstance(count, bool):
        return False
    if isinstance(count, float) and math.isnan(count):
        return True
    return isinstance(count, (int, float)) and count == 0


def validate_booking_form(form_data: Mapping[str, Any] | BookingFormData) -> dict[str, str]:
    """Return field -> error message for every failing field of a booking form."""
    if isinstance(form_data, BookingFormData):
        form_data = form_data.as_form()
    errors: dict[str, str] = {}

    name = _text(form_data.get("name"))
    if not name.strip():
        errors["name"] = VALIDATION_MESSAGES["required"]
    elif not is_valid_name(name):
        errors["name"] = (
            VALIDATION_MESSAGES["nameTooShort"]
            if len(name.strip()) < NAME_MIN_LENGTH
            else VALIDATION_MESSAGES["nameTooLong"]
        )

    email = _text(form_data.get("email"))
    if not email.strip():
        errors["email"] = VALIDATION_MESSAGES["required"]
    elif not is_valid_email(email):
        errors["email"] = VALIDATION_MESSAGES["invalidEmail"]

    phone = _text(form_data.get("phone"))
    if not phone.strip():
        errors["phone"] = VALIDATION_MESSAGES["required"]
    elif not is_valid_phone(phone):
        errors["phone"] = VALIDATION_MESSAGES["invalidPhone"]

    ticket_count = form_data.get("ticketCount")
    if _ticket_count_missing(ticket_count):
        errors["ticketCount"] = VALIDATION_MESSAGES["required"]
    elif not is_valid_ticket_count(ticket_count):
        errors["ticketCount"] = VALIDATION_MESSAGES["invalidTicketCount"]

    special_requests = _text(form_data.get("specialRequests"))
    if len(special_requests) > SPECIAL_REQUESTS_MAX_LENGTH:
        errors["specialRequests"] = VALIDATION_MESSAGES["specialRequestsTooLong"]

    return errors


def is_booking_form_valid(form_data: Mapping[str, Any] | BookingFormData) -> bool:
    return not validate_booking_form(form_data)
