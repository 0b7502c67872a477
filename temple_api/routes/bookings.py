"""Festival booking endpoints."""
import logging

from fastapi import APIRouter, HTTPException

from booking_validation import validate_booking_form
from errors import BookingValidationError, NotificationError
from notifications import send_booking_confirmation
from payments import (
    build_checkout_options,
    build_confirmation,
    checkout_redirect_url,
    create_order,
    fest_event,
    total_amount_rupees,
)
from serialization import serialize_confirmation, serialize_order
from temple_api.models import (
    BookingFormPayload,
    BookingValidationResponse,
    CheckoutResponse,
    PaymentConfirmRequest,
)
from temple_api.utils import utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/bookings", tags=["bookings"])


def _require_valid(payload: BookingFormPayload) -> None:
    errors = validate_booking_form(payload.as_form())
    if errors:
        raise HTTPException(status_code=422, detail={"errors": errors})


@router.post("/validate", response_model=BookingValidationResponse)
def validate_booking(payload: BookingFormPayload) -> dict[str, object]:
    """Field errors for a (partial) booking form."""
    errors = validate_booking_form(payload.as_form())
    total = None
    if "ticketCount" not in errors:
        total = total_amount_rupees(int(payload.ticketCount), fest_event().ticket_price)
    return {"valid": not errors, "errors": errors, "totalAmount": total}


@router.post("/checkout", response_model=CheckoutResponse)
def checkout(payload: BookingFormPayload) -> dict[str, object]:
    """Hosted payment page URL for a valid form."""
    try:
        url = checkout_redirect_url(payload.as_form())
    except BookingValidationError as exc:
        raise HTTPException(status_code=422, detail={"errors": exc.errors}) from exc
    return {"redirectUrl": url}


@router.post("/orders", status_code=201)
def create_booking_order(payload: BookingFormPayload) -> dict[str, object]:
    """Order and checkout widget options for a valid form."""
    _require_valid(payload)
    order = create_order(payload.to_booking())
    return {
        "order": serialize_order(order),
        "checkoutOptions": build_checkout_options(order),
    }


@router.post("/confirm")
def confirm_booking(payload: PaymentConfirmRequest) -> dict[str, object]:
    """Record a successful payment and email the confirmation."""
    _require_valid(payload.form)
    confirmation = build_confirmation(
        payload.form.to_booking(), payload.orderId or payload.paymentId
    )
    response: dict[str, object] = {
        "status": "confirmed",
        "confirmedAt": utc_now(),
        "confirmation": serialize_confirmation(confirmation),
        "emailSent": True,
    }
    try:
        send_booking_confirmation(confirmation)
    except NotificationError as exc:
        logger.warning(f"Booking {confirmation.booking_id} confirmed without email: {exc}")
        response["emailSent"] = False
        response["warning"] = (
            "Payment successful but confirmation email failed. "
            "Please contact support with your payment ID."
        )
    return response
