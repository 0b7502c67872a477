"""Quiz-related Pydantic models."""
from pydantic import BaseModel


class AnswerRequest(BaseModel):
    """Answer for the current question of an attempt."""

    optionIndex: int


class QuizSummary(BaseModel):
    """Catalog entry as listed on the course page."""

    id: int
    title: str
    description: str
    questionCount: int
