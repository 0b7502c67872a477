from __future__ import annotations

from dataclasses import asdict
from typing import Any, Iterable

from models import (
    BookingConfirmation,
    EventInfo,
    PaymentOrder,
    QuizAttempt,
    QuizDefinition,
    QuizQuestion,
    TimingEvent,
)


def serialize_quiz_metadata(quiz: QuizDefinition) -> dict[str, Any]:
    return {
        "id": quiz.id,
        "title": quiz.title,
        "description": quiz.description,
        "questionCount": len(quiz.questions),
    }


def serialize_question(question: QuizQuestion, index: int, total: int) -> dict[str, Any]:
    """Question as shown while answering; the correct index is never included."""
    return {
        "index": index,
        "number": index + 1,
        "total": total,
        "question": question.question_text,
        "options": [
            {"id": option_index, "text": option}
            for option_index, option in enumerate(question.options)
        ],
    }


def serialize_attempt(
    attempt_id: str,
    attempt: QuizAttempt,
    quiz: QuizDefinition,
) -> dict[str, Any]:
    total = len(quiz.questions)
    payload: dict[str, Any] = {
        "attemptId": attempt_id,
        "quizId": quiz.id,
        "title": quiz.title,
        "state": attempt.state.value,
        "currentQuestionIndex": attempt.current_question_index,
        "answeredCount": len(attempt.submitted_answers),
        "questionCount": total,
    }
    if attempt.is_complete:
        payload["score"] = attempt.score
        payload["question"] = None
        payload["review"] = [
            {
                "question": question.question_text,
                "answer": answer,
                "correctAnswer": question.correct_answer_index,
                "isCorrect": answer == question.correct_answer_index,
            }
            for question, answer in zip(quiz.questions, attempt.submitted_answers)
        ]
    else:
        payload["score"] = None
        payload["question"] = serialize_question(
            quiz.questions[attempt.current_question_index],
            attempt.current_question_index,
            total,
        )
    return payload


def serialize_order(order: PaymentOrder) -> dict[str, Any]:
    return {
        "orderId": order.order_id,
        "amount": order.amount,
        "currency": order.currency,
        "name": order.name,
        "email": order.email,
        "phone": order.phone,
    }


def serialize_event(event: EventInfo) -> dict[str, Any]:
    return {
        "name": event.name,
        "date": event.date,
        "time": event.time,
        "venue": event.venue,
        "ticketPrice": event.ticket_price,
    }


def serialize_confirmation(confirmation: BookingConfirmation) -> dict[str, Any]:
    return {
        "bookingId": confirmation.booking_id,
        "paymentStatus": confirmation.payment_status,
        "ticketCount": confirmation.ticket_count,
        "totalAmount": confirmation.total_amount,
        "eventInfo": serialize_event(confirmation.event),
        "customerInfo": asdict(confirmation.customer),
    }


def serialize_timings(events: Iterable[TimingEvent]) -> list[dict[str, str]]:
    return [asdict(event) for event in events]
