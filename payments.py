"""Order building and redirect gating for festival ticket payments.

Checkout happens on a hosted third-party page; nothing here talks to a
payment API. ``checkout_redirect_url`` is what the booking form submits
through. The order helpers feed the embeddable checkout widget.
"""
from __future__ import annotations

import logging
import random
import string
import time
from typing import Any, Mapping

from booking_validation import validate_booking_form
from errors import BookingValidationError
from models import BookingConfirmation, BookingFormData, CustomerInfo, EventInfo, PaymentOrder
from temple_api import config

log = logging.getLogger(__name__)

ORDER_PREFIX = "ARAMBH"
_BASE36 = string.digits + string.ascii_lowercase


def fest_event() -> EventInfo:
    return EventInfo(
        name=config.FEST_NAME,
        date=config.FEST_DATE,
        time=config.FEST_TIME,
        venue=config.FEST_VENUE,
        ticket_price=config.FEST_TICKET_PRICE,
    )


def checkout_redirect_url(form_data: Mapping[str, Any] | BookingFormData) -> str:
    """Return the hosted payment page URL, or raise if the form is invalid."""
    errors = validate_booking_form(form_data)
    if errors:
        log.debug("Booking form rejected: %s", sorted(errors))
        raise BookingValidationError(errors)
    return config.PAYMENT_LINK_URL


def total_amount_rupees(ticket_count: int, ticket_price: int) -> int:
    return ticket_count * ticket_price


def _order_id() -> str:
    suffix = "".join(random.choices(_BASE36, k=9))
    return f"{ORDER_PREFIX}_{int(time.time() * 1000)}_{suffix}"


def create_order(booking: BookingFormData, ticket_price: int | None = None) -> PaymentOrder:
    """Build a local order for a booking; amount is in paisa."""
    price = config.FEST_TICKET_PRICE if ticket_price is None else ticket_price
    order = PaymentOrder(
        order_id=_order_id(),
        amount=booking.ticket_count * price * 100,
        currency=config.CHECKOUT_CURRENCY,
        name=booking.name,
        email=booking.email,
        phone=booking.phone,
    )
    log.info("Created order %s for %d ticket(s)", order.order_id, booking.ticket_count)
    return order


def build_checkout_options(order: PaymentOrder, event: EventInfo | None = None) -> dict[str, Any]:
    event = event or fest_event()
    return {
        "key": config.CHECKOUT_KEY_ID,
        "amount": order.amount,
        "currency": order.currency,
        "name": config.CHECKOUT_MERCHANT_NAME,
        "description": event.name,
        "image": config.CHECKOUT_IMAGE,
        "order_id": order.order_id,
        "prefill": {
            "name": order.name,
            "email": order.email,
            "contact": order.phone,
        },
        "theme": {"color": config.CHECKOUT_THEME_COLOR},
    }


def build_confirmation(
    booking: BookingFormData,
    booking_id: str | None = None,
    event: EventInfo | None = None,
) -> BookingConfirmation:
    """Confirmation for a successful payment; falls back to a generated booking id."""
    event = event or fest_event()
    return BookingConfirmation(
        booking_id=booking_id or f"BK_{int(time.time() * 1000)}",
        payment_status="success",
        ticket_count=booking.ticket_count,
        total_amount=booking.ticket_count * event.ticket_price * 100,
        event=event,
        customer=CustomerInfo(name=booking.name, email=booking.email, phone=booking.phone),
    )
