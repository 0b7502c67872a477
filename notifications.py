from __future__ import annotations

import logging

import requests

from errors import NotificationError
from models import BookingConfirmation
from temple_api import config

log = logging.getLogger(__name__)


def format_amount(paisa: int) -> str:
    return f"₹{paisa / 100:.2f}"


def build_template_params(confirmation: BookingConfirmation) -> dict[str, str]:
    customer = confirmation.customer
    event = confirmation.event
    return {
        "to_name": customer.name,
        "to_email": customer.email,
        "booking_id": confirmation.booking_id,
        "ticket_count": str(confirmation.ticket_count),
        "total_amount": format_amount(confirmation.total_amount),
        "event_name": event.name,
        "event_date": event.date,
        "event_time": event.time,
        "event_venue": event.venue,
        "customer_name": customer.name,
        "customer_email": customer.email,
        "customer_phone": customer.phone,
        "payment_status": confirmation.payment_status.upper(),
    }


def send_booking_confirmation(
    confirmation: BookingConfirmation,
    session: requests.Session | None = None,
) -> None:
    """
    Send the booking confirmation email through the hosted email service.
    Raises NotificationError on any failure; the payment itself is unaffected.
    """
    if not (config.EMAIL_SERVICE_ID and config.EMAIL_TEMPLATE_ID and config.EMAIL_PUBLIC_KEY):
        log.warning("Email service is not configured; skipping booking %s", confirmation.booking_id)
        raise NotificationError("Email service is not configured")

    session = session or requests.Session()
    try:
        response = session.post(
            config.EMAIL_API_URL,
            json={
                "service_id": config.EMAIL_SERVICE_ID,
                "template_id": config.EMAIL_TEMPLATE_ID,
                "user_id": config.EMAIL_PUBLIC_KEY,
                "template_params": build_template_params(confirmation),
            },
            timeout=config.EMAIL_TIMEOUT_SECONDS,
        )
    except requests.RequestException as exc:
        log.error("Failed to send booking confirmation email: %s", exc)
        raise NotificationError(
            "Failed to send confirmation email. Please contact support."
        ) from exc

    if response.status_code != 200:
        log.error(
            "Email sending failed with status %s for booking %s",
            response.status_code,
            confirmation.booking_id,
        )
        raise NotificationError(
            "Failed to send confirmation email. Please contact support."
        )
    log.info("Booking confirmation email sent for %s", confirmation.booking_id)
