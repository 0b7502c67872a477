import argparse
import sys

from booking_validation import validate_booking_form
from errors import NotFoundError
from logging_setup import setup_console_logging
from quiz_engine import QuizEngine, get_default_catalog
from temple_api.config import QUIZ_BANK_PATH

OPTION_LABELS = "ABCD"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Temple site quizzes and booking checks")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("quizzes", help="List available quizzes")

    quiz = sub.add_parser("quiz", help="Take a quiz on the console")
    quiz.add_argument("quiz_id", type=int, help="Quiz id (see `quizzes`)")

    booking = sub.add_parser("validate-booking", help="Check a festival booking form")
    booking.add_argument("--name", default="")
    booking.add_argument("--email", default="")
    booking.add_argument("--phone", default="")
    booking.add_argument("--tickets", type=int, default=0, help="Ticket count (1-10)")
    booking.add_argument("--requests", default=None, help="Special requests")
    return parser.parse_args(argv)


def _read_option(prompt: str) -> int:
    while True:
        raw = input(prompt).strip().upper()
        if len(raw) == 1 and raw in OPTION_LABELS:
            return OPTION_LABELS.index(raw)
        if raw.isdigit() and 1 <= int(raw) <= len(OPTION_LABELS):
            return int(raw) - 1
        print(f"Enter one of {', '.join(OPTION_LABELS)}")


def run_quiz(engine: QuizEngine, quiz_id: int) -> int:
    quiz = engine.get_quiz(quiz_id)
    attempt = engine.start_attempt(quiz_id)
    total = len(quiz.questions)
    print(f"{quiz.title}\n{quiz.description}\n")
    while not attempt.is_complete:
        question = engine.get_current_question(attempt)
        print(f"Question {attempt.current_question_index + 1} of {total}")
        print(question.question_text)
        for label, option in zip(OPTION_LABELS, question.options):
            print(f"  {label}) {option}")
        attempt = engine.submit_answer(attempt, _read_option("> "))
        print()
    score = engine.get_score(attempt)
    print(f"Quiz Completed! Your Score: {score} / {total}")
    return score


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_console_logging()
    engine = QuizEngine(get_default_catalog(QUIZ_BANK_PATH))

    if args.command == "quizzes":
        for quiz in engine.list_quizzes():
            print(f"{quiz.id}: {quiz.title} ({len(quiz.questions)} questions)")
        return 0

    if args.command == "quiz":
        try:
            run_quiz(engine, args.quiz_id)
        except NotFoundError as exc:
            print(exc, file=sys.stderr)
            return 2
        except (EOFError, KeyboardInterrupt):
            print("\nQuiz aborted", file=sys.stderr)
            return 1
        return 0

    form = {
        "name": args.name,
        "email": args.email,
        "phone": args.phone,
        "ticketCount": args.tickets,
    }
    if args.requests is not None:
        form["specialRequests"] = args.requests
    errors = validate_booking_form(form)
    if not errors:
        print("Booking form is valid")
        return 0
    for field_name, message in errors.items():
        print(f"{field_name}: {message}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
