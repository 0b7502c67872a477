import pytest
import requests

import notifications
from errors import NotificationError
from models import BookingConfirmation, CustomerInfo, EventInfo


def _confirmation() -> BookingConfirmation:
    return BookingConfirmation(
        booking_id="order_9",
        payment_status="success",
        ticket_count=2,
        total_amount=19800,
        event=EventInfo("Fest", "Sunday", "Noon", "Temple", 99),
        customer=CustomerInfo("Radha", "radha@example.com", "9876543210"),
    )


@pytest.fixture
def configured(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(notifications.config, "EMAIL_SERVICE_ID", "svc")
    monkeypatch.setattr(notifications.config, "EMAIL_TEMPLATE_ID", "tpl")
    monkeypatch.setattr(notifications.config, "EMAIL_PUBLIC_KEY", "pub")
    monkeypatch.setattr(notifications.config, "EMAIL_API_URL", "https://mail.example.com/send")


class FakeResponse:
    def __init__(self, status_code: int = 200):
        self.status_code = status_code


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.calls = []

    def post(self, url, json=None, timeout=None):
        self.calls.append((url, json))
        if self.error:
            raise self.error
        return self.response


def test_template_params_are_flat_strings() -> None:
    params = notifications.build_template_params(_confirmation())
    assert params["total_amount"] == "₹198.00"
    assert params["ticket_count"] == "2"
    assert params["payment_status"] == "SUCCESS"
    assert params["to_email"] == "radha@example.com"
    assert all(isinstance(value, str) for value in params.values())


def test_send_posts_to_email_service(configured: None) -> None:
    session = FakeSession()
    notifications.send_booking_confirmation(_confirmation(), session=session)
    url, body = session.calls[0]
    assert url == "https://mail.example.com/send"
    assert body["service_id"] == "svc"
    assert body["template_id"] == "tpl"
    assert body["user_id"] == "pub"
    assert body["template_params"]["booking_id"] == "order_9"


def test_non_200_raises(configured: None) -> None:
    with pytest.raises(NotificationError):
        notifications.send_booking_confirmation(
            _confirmation(), session=FakeSession(FakeResponse(400))
        )


def test_transport_error_raises(configured: None) -> None:
    session = FakeSession(error=requests.ConnectionError("down"))
    with pytest.raises(NotificationError):
        notifications.send_booking_confirmation(_confirmation(), session=session)


def test_missing_configuration_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(notifications.config, "EMAIL_SERVICE_ID", "")
    session = FakeSession()
    with pytest.raises(NotificationError):
        notifications.send_booking_confirmation(_confirmation(), session=session)
    assert session.calls == []
