import json
from pathlib import Path

import pytest

import quiz_engine
from errors import CatalogError, InvalidInputError, NotFoundError, StateError
from models import AttemptState, QuizAttempt, QuizDefinition, QuizQuestion
from quiz_bank import GITA_QUIZZES
from quiz_engine import QuizCatalog, QuizEngine


def _quiz(quiz_id: int, correct: list[int]) -> QuizDefinition:
    return QuizDefinition(
        id=quiz_id,
        title=f"Quiz {quiz_id}",
        description="",
        questions=tuple(
            QuizQuestion(f"Q{i}", ("a", "b", "c", "d"), answer)
            for i, answer in enumerate(correct)
        ),
    )


@pytest.fixture
def engine() -> QuizEngine:
    return QuizEngine(QuizCatalog([_quiz(7, [1, 2, 2])]))


def test_builtin_catalog_is_well_formed() -> None:
    catalog = QuizCatalog(GITA_QUIZZES)
    assert len(catalog) == 3
    for quiz in catalog.quizzes():
        assert len(quiz.questions) >= 1
        for question in quiz.questions:
            assert len(question.options) == 4
            assert 0 <= question.correct_answer_index <= 3


def test_catalog_rejects_empty_quiz() -> None:
    with pytest.raises(CatalogError):
        QuizCatalog([_quiz(1, [])])


def test_catalog_rejects_bad_answer_index_and_option_count() -> None:
    with pytest.raises(CatalogError):
        QuizCatalog([_quiz(1, [4])])
    bad_options = QuizDefinition(1, "t", "d", (QuizQuestion("Q", ("a", "b"), 0),))
    with pytest.raises(CatalogError):
        QuizCatalog([bad_options])


def test_catalog_rejects_duplicate_ids() -> None:
    with pytest.raises(CatalogError):
        QuizCatalog([_quiz(1, [0]), _quiz(1, [1])])


def test_start_attempt_is_fresh(engine: QuizEngine) -> None:
    attempt = engine.start_attempt(7)
    assert attempt.current_question_index == 0
    assert attempt.submitted_answers == ()
    assert attempt.score is None
    assert attempt.state is AttemptState.IN_PROGRESS


def test_start_attempt_unknown_quiz(engine: QuizEngine) -> None:
    with pytest.raises(NotFoundError):
        engine.start_attempt(99)


def test_restart_discards_progress(engine: QuizEngine) -> None:
    attempt = engine.submit_answer(engine.start_attempt(7), 1)
    restarted = engine.start_attempt(7)
    assert restarted.submitted_answers == ()
    assert attempt.submitted_answers == (1,)


def test_progress_and_score(engine: QuizEngine) -> None:
    attempt = engine.start_attempt(7)
    attempt = engine.submit_answer(attempt, 1)
    assert attempt.current_question_index == 1
    assert attempt.state is AttemptState.IN_PROGRESS
    attempt = engine.submit_answer(attempt, 0)
    assert attempt.current_question_index == 2
    assert engine.get_current_question(attempt).question_text == "Q2"
    attempt = engine.submit_answer(attempt, 2)

    assert attempt.state is AttemptState.COMPLETED
    assert attempt.submitted_answers == (1, 0, 2)
    assert engine.get_score(attempt) == 2


def test_completed_attempt_rejects_answers(engine: QuizEngine) -> None:
    attempt = engine.start_attempt(7)
    for answer in (1, 2, 2):
        attempt = engine.submit_answer(attempt, answer)
    assert engine.get_score(attempt) == 3
    with pytest.raises(InvalidInputError):
        engine.submit_answer(attempt, 0)
    with pytest.raises(StateError):
        engine.get_current_question(attempt)


def test_submit_does_not_mutate_input(engine: QuizEngine) -> None:
    first = engine.start_attempt(7)
    second = engine.submit_answer(first, 3)
    assert first.submitted_answers == ()
    assert second is not first


@pytest.mark.parametrize("bad", [-1, 4, True, 1.0, "1"])
def test_submit_rejects_out_of_range_option(engine: QuizEngine, bad: object) -> None:
    with pytest.raises(InvalidInputError):
        engine.submit_answer(engine.start_attempt(7), bad)


def test_score_before_completion_is_state_error(engine: QuizEngine) -> None:
    with pytest.raises(StateError):
        engine.get_score(engine.start_attempt(7))


def test_score_matches_answer_count_for_builtin_quiz() -> None:
    engine = QuizEngine(QuizCatalog(GITA_QUIZZES))
    quiz = engine.get_quiz(1)
    answers = [question.correct_answer_index for question in quiz.questions]
    answers[0] = (answers[0] + 1) % 4
    attempt = engine.start_attempt(1)
    for index, answer in enumerate(answers):
        assert attempt.current_question_index == index
        attempt = engine.submit_answer(attempt, answer)
    assert engine.get_score(attempt) == len(answers) - 1


def test_attempt_for_unknown_quiz_is_not_found(engine: QuizEngine) -> None:
    with pytest.raises(NotFoundError):
        engine.submit_answer(QuizAttempt(quiz_id=42), 0)


def test_load_catalog_file(tmp_path: Path) -> None:
    path = tmp_path / "quizzes.json"
    path.write_text(
        json.dumps(
            [
                {
                    "id": 5,
                    "title": "Custom",
                    "description": "From file",
                    "questions": [
                        {"question": "Q", "options": ["a", "b", "c", "d"], "correctAnswer": 3}
                    ],
                }
            ]
        ),
        encoding="utf-8",
    )
    catalog = quiz_engine.load_catalog_file(path)
    assert catalog.get(5).questions[0].correct_answer_index == 3

    path.write_text(json.dumps([{"id": 6, "title": "Empty", "questions": []}]), encoding="utf-8")
    with pytest.raises(CatalogError):
        quiz_engine.load_catalog_file(path)

    for bad_quiz in (
        {"id": 7, "title": "Loose", "questions": ["not a question"]},
        {"id": 8, "title": "Split", "questions": [{"question": "Q", "options": "abcd", "correctAnswer": 0}]},
        {"id": 9, "title": "Numbers", "questions": [{"question": "Q", "options": [1, 2, 3, 4], "correctAnswer": 0}]},
        "not a quiz",
    ):
        path.write_text(json.dumps([bad_quiz]), encoding="utf-8")
        with pytest.raises(CatalogError):
            quiz_engine.load_catalog_file(path)


def test_default_catalog_uses_given_bank_file(tmp_path: Path) -> None:
    assert len(quiz_engine.get_default_catalog()) == len(GITA_QUIZZES)

    path = tmp_path / "bank.json"
    path.write_text(
        json.dumps(
            [{"id": 11, "title": "Solo", "questions": [{"question": "Q", "options": ["a", "b", "c", "d"], "correctAnswer": 1}]}]
        ),
        encoding="utf-8",
    )
    catalog = quiz_engine.get_default_catalog(path)
    assert [quiz.id for quiz in catalog.quizzes()] == [11]
