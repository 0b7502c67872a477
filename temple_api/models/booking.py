"""Booking-related Pydantic models."""
from typing import Any

from pydantic import BaseModel, Field

from models import BookingFormData


def _text(value: Any) -> str:
    return "" if value is None else str(value)


class BookingFormPayload(BaseModel):
    """Partially filled booking form as sent by the page.

    Fields are deliberately loose; the booking validator reports problems.
    """

    name: Any = None
    email: Any = None
    phone: Any = None
    ticketCount: Any = None
    specialRequests: Any = None

    def as_form(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)

    def to_booking(self) -> BookingFormData:
        """Only call on a form that passed validation."""
        return BookingFormData(
            name=_text(self.name).strip(),
            email=_text(self.email).strip(),
            phone="".join(_text(self.phone).split()),
            ticket_count=int(self.ticketCount),
            special_requests=None if self.specialRequests is None else _text(self.specialRequests),
        )


class BookingValidationResponse(BaseModel):
    """Validation outcome for a booking form."""

    valid: bool
    errors: dict[str, str] = Field(default_factory=dict)
    totalAmount: int | None = None


class CheckoutResponse(BaseModel):
    """Where the browser goes to pay."""

    redirectUrl: str


class PaymentConfirmRequest(BaseModel):
    """Payment success callback payload."""

    form: BookingFormPayload
    paymentId: str | None = None
    orderId: str | None = None
