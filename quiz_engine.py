from __future__ import annotations

import json
import logging
from dataclasses import replace
from functools import lru_cache
from pathlib import Path
from typing import Iterable

from errors import CatalogError, InvalidInputError, NotFoundError, StateError
from models import QuizAttempt, QuizDefinition, QuizQuestion
from quiz_bank import GITA_QUIZZES, definition_from_payload

log = logging.getLogger(__name__)

OPTION_COUNT = 4


def _check_definition(quiz: QuizDefinition) -> None:
    if not isinstance(quiz.id, int) or isinstance(quiz.id, bool):
        raise CatalogError(f"Quiz id must be an integer, got {quiz.id!r}")
    if not quiz.questions:
        raise CatalogError(f"Quiz {quiz.id} has no questions")
    for position, question in enumerate(quiz.questions):
        if len(question.options) != OPTION_COUNT:
            raise CatalogError(
                f"Quiz {quiz.id} question {position} has {len(question.options)} options, "
                f"expected {OPTION_COUNT}"
            )
        index = question.correct_answer_index
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < OPTION_COUNT:
            raise CatalogError(
                f"Quiz {quiz.id} question {position} has invalid correct answer {index!r}"
            )


class QuizCatalog:
    """Read-only set of quiz definitions keyed by id."""

    def __init__(self, definitions: Iterable[QuizDefinition]):
        quizzes: dict[int, QuizDefinition] = {}
        for quiz in definitions:
            _check_definition(quiz)
            if quiz.id in quizzes:
                raise CatalogError(f"Duplicate quiz id {quiz.id}")
            quizzes[quiz.id] = quiz
        self._quizzes = quizzes

    def __len__(self) -> int:
        return len(self._quizzes)

    def __contains__(self, quiz_id: object) -> bool:
        return quiz_id in self._quizzes

    def get(self, quiz_id: int) -> QuizDefinition:
        try:
            return self._quizzes[quiz_id]
        except (KeyError, TypeError):
            raise NotFoundError(f"Quiz {quiz_id!r} not found") from None

    def quizzes(self) -> list[QuizDefinition]:
        return list(self._quizzes.values())


def load_catalog_file(path: Path) -> QuizCatalog:
    """Build a catalog from a JSON list of camelCase quiz payloads."""
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(payload, list):
        raise CatalogError(f"{path} must contain a list of quizzes")
    catalog = QuizCatalog(definition_from_payload(item) for item in payload)
    log.info("Loaded %d quizzes from %s", len(catalog), path)
    return catalog


@lru_cache(maxsize=None)
def get_default_catalog(bank_path: Path | None = None) -> QuizCatalog:
    """Process-wide catalog, built on first use; the built-in bank unless a file is given."""
    if bank_path is not None:
        return load_catalog_file(bank_path)
    return QuizCatalog(GITA_QUIZZES)


class QuizEngine:
    """Drives quiz attempts against a catalog.

    Attempts are immutable values: each transition returns a new
    ``QuizAttempt`` and leaves the one passed in untouched.
    """

    def __init__(self, catalog: QuizCatalog | None = None):
        self.catalog = catalog if catalog is not None else get_default_catalog()

    def list_quizzes(self) -> list[QuizDefinition]:
        return self.catalog.quizzes()

    def get_quiz(self, quiz_id: int) -> QuizDefinition:
        return self.catalog.get(quiz_id)

    def start_attempt(self, quiz_id: int) -> QuizAttempt:
        quiz = self.catalog.get(quiz_id)
        log.debug("Starting attempt for quiz %s", quiz.id)
        return QuizAttempt(quiz_id=quiz.id)

    def submit_answer(self, attempt: QuizAttempt, option_index: int) -> QuizAttempt:
        if (
            not isinstance(option_index, int)
            or isinstance(option_index, bool)
            or not 0 <= option_index < OPTION_COUNT
        ):
            raise InvalidInputError(
                f"Option index must be between 0 and {OPTION_COUNT - 1}, got {option_index!r}"
            )
        quiz = self.catalog.get(attempt.quiz_id)
        total = len(quiz.questions)
        if attempt.is_complete or len(attempt.submitted_answers) >= total:
            raise InvalidInputError("Quiz is already complete")

        answers = attempt.submitted_answers + (option_index,)
        if len(answers) < total:
            return replace(
                attempt,
                submitted_answers=answers,
                current_question_index=attempt.current_question_index + 1,
            )

        score = sum(
            1
            for answer, question in zip(answers, quiz.questions)
            if answer == question.correct_answer_index
        )
        log.info("Quiz %s completed with score %d/%d", quiz.id, score, total)
        return replace(attempt, submitted_answers=answers, score=score)

    def get_current_question(self, attempt: QuizAttempt) -> QuizQuestion:
        if attempt.is_complete:
            raise StateError("Quiz is complete; no current question")
        quiz = self.catalog.get(attempt.quiz_id)
        return quiz.questions[attempt.current_question_index]

    def get_score(self, attempt: QuizAttempt) -> int:
        if not attempt.is_complete:
            raise StateError("Quiz is not complete yet")
        return attempt.score

    def question_count(self, attempt: QuizAttempt) -> int:
        return len(self.catalog.get(attempt.quiz_id).questions)
