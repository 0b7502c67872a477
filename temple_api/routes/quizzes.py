"""Quiz catalog and attempt endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from errors import InvalidInputError, NotFoundError, StateError
from quiz_engine import QuizEngine
from serialization import serialize_attempt, serialize_quiz_metadata
from temple_api.dependencies import get_attempt_store, get_quiz_engine
from temple_api.models import AnswerRequest, QuizSummary
from temple_api.services.attempt_service import AttemptStore
from temple_api.utils import validate_id

router = APIRouter(prefix="/api", tags=["quizzes"])


@router.get("/quizzes", response_model=list[QuizSummary])
def list_quizzes(
    engine: Annotated[QuizEngine, Depends(get_quiz_engine)],
) -> list[dict[str, object]]:
    """List the quizzes of the Gita course."""
    return [serialize_quiz_metadata(quiz) for quiz in engine.list_quizzes()]


@router.post("/quizzes/{quiz_id}/attempts", status_code=201)
def start_attempt(
    quiz_id: int,
    engine: Annotated[QuizEngine, Depends(get_quiz_engine)],
    store: Annotated[AttemptStore, Depends(get_attempt_store)],
    previousAttemptId: str | None = None,
) -> dict[str, object]:
    """Start a fresh attempt; a restart discards the attempt it replaces."""
    try:
        attempt = engine.start_attempt(quiz_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    if previousAttemptId:
        store.discard(validate_id("previousAttemptId", previousAttemptId))
    attempt_id = store.create(attempt)
    return serialize_attempt(attempt_id, attempt, engine.get_quiz(quiz_id))


@router.get("/attempts/{attempt_id}")
def get_attempt(
    attempt_id: str,
    engine: Annotated[QuizEngine, Depends(get_quiz_engine)],
    store: Annotated[AttemptStore, Depends(get_attempt_store)],
) -> dict[str, object]:
    """Current question or final score of an attempt."""
    attempt_id = validate_id("attemptId", attempt_id)
    attempt = store.get(attempt_id)
    return serialize_attempt(attempt_id, attempt, engine.get_quiz(attempt.quiz_id))


@router.post("/attempts/{attempt_id}/answers")
def submit_answer(
    attempt_id: str,
    payload: AnswerRequest,
    engine: Annotated[QuizEngine, Depends(get_quiz_engine)],
    store: Annotated[AttemptStore, Depends(get_attempt_store)],
) -> dict[str, object]:
    """Answer the current question."""
    attempt_id = validate_id("attemptId", attempt_id)
    attempt = store.get(attempt_id)
    try:
        attempt = engine.submit_answer(attempt, payload.optionIndex)
    except InvalidInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    store.save(attempt_id, attempt)
    return serialize_attempt(attempt_id, attempt, engine.get_quiz(attempt.quiz_id))


@router.get("/attempts/{attempt_id}/score")
def get_score(
    attempt_id: str,
    engine: Annotated[QuizEngine, Depends(get_quiz_engine)],
    store: Annotated[AttemptStore, Depends(get_attempt_store)],
) -> dict[str, object]:
    """Final score of a completed attempt."""
    attempt_id = validate_id("attemptId", attempt_id)
    attempt = store.get(attempt_id)
    try:
        score = engine.get_score(attempt)
    except StateError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return {
        "attemptId": attempt_id,
        "quizId": attempt.quiz_id,
        "score": score,
        "questionCount": engine.question_count(attempt),
    }


@router.delete("/attempts/{attempt_id}", status_code=204)
def discard_attempt(
    attempt_id: str,
    store: Annotated[AttemptStore, Depends(get_attempt_store)],
) -> None:
    """Exit the quiz and forget the attempt."""
    attempt_id = validate_id("attemptId", attempt_id)
    if not store.discard(attempt_id):
        raise HTTPException(status_code=404, detail="Attempt not found")
