# mentormatch/services/availability.py
"""
Weekly availability matching.

Pure functions over ``Availability`` records: whether a window covers a
concrete slot, and whether a mentor (or any of several mentors) and a mentee
are both free for it. Missing availability is never an error, it just means
"not available".
"""

from datetime import date, time
from typing import Iterable, Optional, Tuple

from mentormatch.errors import ValidationError
from mentormatch.schemas.availability import Availability, Weekday

# Indexed by date.weekday(), which is Monday == 0 regardless of locale.
_WEEKDAY_BY_INDEX = (
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
    Weekday.SATURDAY,
    Weekday.SUNDAY,
)

# Fixed one-hour slots offered when booking. There is no lunch slot.
TIME_SLOTS = (
    "09:00-10:00",
    "10:00-11:00",
    "11:00-12:00",
    "13:00-14:00",
    "14:00-15:00",
    "15:00-16:00",
    "16:00-17:00",
)


def weekday_of(day: date) -> Weekday:
    return _WEEKDAY_BY_INDEX[day.weekday()]


def contains_slot(availability: Optional[Availability], day: date, start: time, end: time) -> bool:
    """True iff ``day`` falls on one of the window's weekdays and start..end fits inside it."""
    if availability is None or not availability.days:
        return False
    return (
        weekday_of(day) in availability.days
        and start >= availability.start_time
        and end <= availability.end_time
    )


def is_slot_viable(
    mentor_availability: Optional[Availability],
    mentee_availability: Optional[Availability],
    day: date,
    start: time,
    end: time,
) -> bool:
    return contains_slot(mentee_availability, day, start, end) and contains_slot(
        mentor_availability, day, start, end
    )


def is_group_slot_viable(
    mentor_availabilities: Iterable[Optional[Availability]],
    mentee_availability: Optional[Availability],
    day: date,
    start: time,
    end: time,
) -> bool:
    """The mentee must be free; any one of the candidate mentors being free is enough."""
    if not contains_slot(mentee_availability, day, start, end):
        return False
    return any(contains_slot(availability, day, start, end) for availability in mentor_availabilities)


def parse_time_slot(label: str) -> Tuple[time, time]:
    """Split a ``HH:MM-HH:MM`` slot label into clock times."""
    try:
        start_text, end_text = label.split("-")
        start = time.fromisoformat(start_text.strip())
        end = time.fromisoformat(end_text.strip())
    except ValueError:
        raise ValidationError(f"Invalid time slot '{label}', expected HH:MM-HH:MM")
    if start >= end:
        raise ValidationError(f"Invalid time slot '{label}', start must be before end")
    return start, end
