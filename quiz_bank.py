"""Built-in Gita course quizzes."""
from __future__ import annotations

from typing import Any

from errors import CatalogError
from models import QuizDefinition, QuizQuestion


def _q(text: str, options: list[str], correct: int) -> QuizQuestion:
    return QuizQuestion(question_text=text, options=tuple(options), correct_answer_index=correct)


GITA_QUIZZES: tuple[QuizDefinition, ...] = (
    QuizDefinition(
        id=1,
        title="Chapter 1-6: Karma Yoga",
        description="Test your knowledge on the path of action.",
        questions=(
            _q("Who is the speaker of Bhagavad Gita?", ["Arjuna", "Krishna", "Sanjaya", "Dhritarashtra"], 1),
            _q("Where was the Gita spoken?", ["Ayodhya", "Vrindavan", "Kurukshetra", "Hastinapur"], 2),
            _q(
                "What represents the body in the analogy of the chariot?",
                ["Horses", "Reins", "Chariot", "Passenger"],
                2,
            ),
            _q("What is the nature of the soul?", ["Temporary", "Eternal", "Changing", "Invisible"], 1),
            _q("Karma Yoga means:", ["Inaction", "Selfish action", "Action in devotion", "Renouncing work"], 2),
            _q("What is the enemy of the soul?", ["Lust", "Money", "Power", "Time"], 0),
            _q("Arjuna refused to fight because of:", ["Fear", "Compassion", "Laziness", "Anger"], 1),
            _q("Who recorded the Gita?", ["Valmiki", "Vyasa", "Ganesh", "Narada"], 2),
            _q("The soul transmigrates based on:", ["Chance", "Desire & Karma", "God's whim", "Evolution"], 1),
            _q("To whom should one surrender?", ["Mind", "Senses", "Supreme Lord", "Demigods"], 2),
        ),
    ),
    QuizDefinition(
        id=2,
        title="Chapter 7-12: Bhakti Yoga",
        description="Deep dive into the path of Devotion.",
        questions=(
            _q("What is the supreme destination?", ["Heaven", "Brahmajyoti", "Vaikuntha", "Earth"], 2),
            _q("Krishna is the source of:", ["Everything", "Some things", "Nothing", "Only spirit"], 0),
            _q("Bhakti means:", ["Knowledge", "Devotional Service", "Austerity", "Meditation"], 1),
            _q("Who is the greatest Yogi?", ["Jnani", "Karmi", "Bhakta", "Tapasvi"], 2),
            _q("The form of Krishna is:", ["Imaginary", "Material", "Eternal & Blissful", "Temporary"], 2),
            _q("Which leaf is mentioned as an offering?", ["Neem", "Tulasi", "Banyan", "Peepal"], 1),
            _q("God is situated in:", ["Heart of all beings", "Only Temples", "Only Sky", "Books"], 0),
            _q("What destroys ignorance?", ["Money", "Rituals", "Knowledge of Self", "Sleep"], 2),
            _q("The universal form was shown to:", ["Duryodhana", "Arjuna", "Bhishma", "Karna"], 1),
            _q("The most confidential knowledge is:", ["Become My Devotee", "Work Hard", "Meditate", "Study"], 0),
        ),
    ),
    QuizDefinition(
        id=3,
        title="General Krishna Consciousness",
        description="General concepts of spiritual life.",
        questions=(
            _q("What is the Maha Mantra?", ["Om Namah Shivaya", "Gayatri", "Hare Krishna", "Om"], 2),
            _q("How many regulative principles are there?", ["2", "4", "10", "5"], 1),
            _q("We are not the body but:", ["Mind", "Spirit Soul", "Brain", "Energy"], 1),
            _q("What is Prasadam?", ["Ordinary food", "Mercy of Lord", "Medicine", "Snack"], 1),
            _q(
                "Who is the Founder Acharya of ISKCON?",
                ["Bhaktisiddhanta", "Prabhupada", "Bhaktivinoda", "Rupa Goswami"],
                1,
            ),
            _q("The age of quarrel is called:", ["Satya Yuga", "Treta Yuga", "Dvapara Yuga", "Kali Yuga"], 3),
            _q("The recommended process for this age is:", ["Yoga", "Chanting Holy Names", "Silence", "Tapasya"], 1),
            _q("Vedas means:", ["Knowledge", "History", "Poems", "Laws"], 0),
            _q("The ultimate goal of life is:", ["Wealth", "Moksha", "Love of God", "Fame"], 2),
            _q("Who is the mother of the universe?", ["Durga", "Earth", "Cow", "All of above"], 3),
        ),
    ),
)


def definition_from_payload(payload: dict[str, Any]) -> QuizDefinition:
    """Build a QuizDefinition from a camelCase payload (as the site stores quizzes)."""
    if not isinstance(payload, dict):
        raise CatalogError(f"Quiz entry must be an object, got {type(payload).__name__}")
    items = payload.get("questions", [])
    if not isinstance(items, list):
        raise CatalogError(f"Quiz {payload.get('id')!r} questions must be a list")
    questions = []
    for position, item in enumerate(items):
        if not isinstance(item, dict):
            raise CatalogError(f"Quiz {payload.get('id')!r} question {position} must be an object")
        options = item.get("options", [])
        if not isinstance(options, list) or not all(isinstance(option, str) for option in options):
            raise CatalogError(
                f"Quiz {payload.get('id')!r} question {position} options must be a list of strings"
            )
        questions.append(_q(str(item.get("question", "")), options, item.get("correctAnswer", -1)))
    return QuizDefinition(
        id=payload.get("id"),
        title=str(payload.get("title", "")),
        description=str(payload.get("description", "")),
        questions=tuple(questions),
    )
