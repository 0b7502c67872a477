"""FastAPI dependencies."""
from content_client import ContentClient
from quiz_engine import QuizEngine, get_default_catalog
from temple_api.config import QUIZ_BANK_PATH
from temple_api.services.attempt_service import AttemptStore, attempt_store

_engine: QuizEngine | None = None
_content_client: ContentClient | None = None


def get_quiz_engine() -> QuizEngine:
    """Engine over the process-wide quiz catalog."""
    global _engine
    if _engine is None:
        _engine = QuizEngine(get_default_catalog(QUIZ_BANK_PATH))
    return _engine


def get_attempt_store() -> AttemptStore:
    return attempt_store


def get_content_client() -> ContentClient:
    global _content_client
    if _content_client is None:
        _content_client = ContentClient()
    return _content_client


__all__ = ["get_attempt_store", "get_content_client", "get_quiz_engine"]
