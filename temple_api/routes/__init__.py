"""API route modules."""
from temple_api.routes import bookings, content, quizzes, site

__all__ = ["bookings", "content", "quizzes", "site"]
