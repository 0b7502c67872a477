"""Static temple schedule shown on the darshan page."""
from __future__ import annotations

from models import TimingEvent

MORNING_SCHEDULE = (
    TimingEvent("04:30 AM", "Mangala Aarti", "First auspicious ceremony"),
    TimingEvent("07:30 AM", "Sringar Aarti", "Deity greeting"),
    TimingEvent("08:00 AM", "Guru Puja", "Worship of spiritual master"),
    TimingEvent("08:30 AM", "Bhagavatam Class", "Scriptural discourse"),
)

EVENING_SCHEDULE = (
    TimingEvent("04:15 PM", "Dhupa Aarti", "Afternoon offering"),
    TimingEvent("06:30 PM", "Tulasi Aarti", "Prayer to sacred plant"),
    TimingEvent("07:00 PM", "Sandhya Aarti", "Main evening ceremony"),
    TimingEvent("08:30 PM", "Shayana Aarti", "Resting ceremony"),
)

FEST_PRIZES = ("Television", "Tablet", "Microwave", "And many more surprises")
