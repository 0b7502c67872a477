import re

import pytest

import payments
from errors import BookingValidationError
from models import BookingFormData, EventInfo


def _booking(tickets: int = 2) -> BookingFormData:
    return BookingFormData(
        name="Gopal", email="gopal@example.com", phone="9123456789", ticket_count=tickets
    )


def test_redirect_only_for_valid_form(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(payments.config, "PAYMENT_LINK_URL", "https://pay.example.com/fest")
    assert payments.checkout_redirect_url(_booking()) == "https://pay.example.com/fest"

    with pytest.raises(BookingValidationError) as excinfo:
        payments.checkout_redirect_url({"name": "Gopal"})
    assert set(excinfo.value.errors) == {"email", "phone", "ticketCount"}


def test_create_order_amount_in_paisa() -> None:
    order = payments.create_order(_booking(3), ticket_price=140)
    assert order.amount == 3 * 140 * 100
    assert order.currency == "INR"
    assert order.email == "gopal@example.com"
    assert re.fullmatch(r"ARAMBH_\d+_[0-9a-z]{9}", order.order_id)


def test_create_order_uses_configured_price(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(payments.config, "FEST_TICKET_PRICE", 99)
    assert payments.create_order(_booking(1)).amount == 9900


def test_checkout_options_prefill() -> None:
    order = payments.create_order(_booking(1), ticket_price=99)
    options = payments.build_checkout_options(order)
    assert options["order_id"] == order.order_id
    assert options["amount"] == 9900
    assert options["prefill"] == {
        "name": "Gopal",
        "email": "gopal@example.com",
        "contact": "9123456789",
    }
    assert options["theme"]["color"] == "#d4af37"


def test_build_confirmation() -> None:
    event = EventInfo("Fest", "Sunday", "Noon", "Temple", 99)
    confirmation = payments.build_confirmation(_booking(2), "order_1", event)
    assert confirmation.booking_id == "order_1"
    assert confirmation.payment_status == "success"
    assert confirmation.total_amount == 2 * 99 * 100
    assert confirmation.customer.phone == "9123456789"

    generated = payments.build_confirmation(_booking(1), None, event)
    assert generated.booking_id.startswith("BK_")


def test_total_amount_rupees() -> None:
    assert payments.total_amount_rupees(4, 99) == 396
