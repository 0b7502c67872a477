"""Pydantic models."""
from temple_api.models.booking import (
    BookingFormPayload,
    BookingValidationResponse,
    CheckoutResponse,
    PaymentConfirmRequest,
)
from temple_api.models.quiz import AnswerRequest, QuizSummary

__all__ = [
    "AnswerRequest",
    "BookingFormPayload",
    "BookingValidationResponse",
    "CheckoutResponse",
    "PaymentConfirmRequest",
    "QuizSummary",
]
