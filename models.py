from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple


class AttemptState(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass(frozen=True)
class QuizQuestion:
    question_text: str
    options: Tuple[str, ...]
    correct_answer_index: int


@dataclass(frozen=True)
class QuizDefinition:
    id: int
    title: str
    description: str
    questions: Tuple[QuizQuestion, ...]


@dataclass(frozen=True)
class QuizAttempt:
    quiz_id: int
    current_question_index: int = 0
    submitted_answers: Tuple[int, ...] = ()
    score: int | None = None  # set once the last answer is in

    @property
    def is_complete(self) -> bool:
        return self.score is not None

    @property
    def state(self) -> AttemptState:
        return AttemptState.COMPLETED if self.is_complete else AttemptState.IN_PROGRESS


@dataclass
class BookingFormData:
    name: str = ""
    email: str = ""
    phone: str = ""
    ticket_count: int = 0
    special_requests: str | None = None

    def as_form(self) -> Dict[str, Any]:
        """Return the camelCase mapping used by the booking validator."""
        form: Dict[str, Any] = {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "ticketCount": self.ticket_count,
        }
        if self.special_requests is not None:
            form["specialRequests"] = self.special_requests
        return form


@dataclass
class PaymentOrder:
    order_id: str
    amount: int  # paisa
    currency: str
    name: str
    email: str
    phone: str


@dataclass(frozen=True)
class EventInfo:
    name: str
    date: str
    time: str
    venue: str
    ticket_price: int  # rupees


@dataclass(frozen=True)
class CustomerInfo:
    name: str
    email: str
    phone: str


@dataclass
class BookingConfirmation:
    booking_id: str
    payment_status: str  # "success" | "failed" | "pending"
    ticket_count: int
    total_amount: int  # paisa
    event: EventInfo
    customer: CustomerInfo


@dataclass(frozen=True)
class TimingEvent:
    time: str
    event: str
    description: str = ""


@dataclass
class PostPage:
    posts: list[dict[str, Any]] = field(default_factory=list)
    has_more: bool = False
