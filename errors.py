"""Exceptions raised by the quiz, booking, content and notification modules."""
from __future__ import annotations


class QuizError(Exception):
    """Base class for quiz engine usage errors."""


class NotFoundError(QuizError):
    """Unknown quiz id."""


class InvalidInputError(QuizError):
    """Out-of-range answer, or an answer sent to a completed attempt."""


class StateError(QuizError):
    """Operation not allowed in the attempt's current state."""


class CatalogError(QuizError, ValueError):
    """Malformed quiz definition found while building a catalog."""


class BookingValidationError(Exception):
    """Booking form failed validation; ``errors`` maps field to message."""

    def __init__(self, errors: dict[str, str]):
        super().__init__("Booking form is invalid")
        self.errors = errors


class ContentError(Exception):
    """The content service could not be queried or returned garbage."""


class NotificationError(Exception):
    """Confirmation email could not be sent."""
