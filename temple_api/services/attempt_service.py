"""In-memory store for running quiz attempts."""
import logging
import threading
import uuid
from datetime import datetime, timedelta, timezone

from fastapi import HTTPException

from models import QuizAttempt
from temple_api.config import ATTEMPT_TTL_MINUTES

logger = logging.getLogger(__name__)


class AttemptStore:
    """Attempts keyed by id; entries idle longer than the TTL are dropped."""

    def __init__(self, ttl_minutes: int = ATTEMPT_TTL_MINUTES):
        self.ttl = timedelta(minutes=ttl_minutes)
        self._attempts: dict[str, tuple[QuizAttempt, datetime]] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._attempts)

    def _purge_expired(self, now: datetime) -> None:
        if self.ttl <= timedelta(0):
            return
        cutoff = now - self.ttl
        expired = [key for key, (_, touched) in self._attempts.items() if touched < cutoff]
        for key in expired:
            del self._attempts[key]
        if expired:
            logger.info(f"Dropped {len(expired)} idle quiz attempts")

    def create(self, attempt: QuizAttempt) -> str:
        attempt_id = uuid.uuid4().hex
        self.save(attempt_id, attempt)
        return attempt_id

    def save(self, attempt_id: str, attempt: QuizAttempt) -> None:
        now = datetime.now(timezone.utc)
        with self._lock:
            self._purge_expired(now)
            self._attempts[attempt_id] = (attempt, now)

    def get(self, attempt_id: str) -> QuizAttempt:
        now = datetime.now(timezone.utc)
        with self._lock:
            self._purge_expired(now)
            entry = self._attempts.get(attempt_id)
            if entry is None:
                raise HTTPException(status_code=404, detail="Attempt not found")
            return entry[0]

    def discard(self, attempt_id: str) -> bool:
        with self._lock:
            return self._attempts.pop(attempt_id, None) is not None


attempt_store = AttemptStore()
