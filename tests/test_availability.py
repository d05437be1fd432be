# tests/test_availability.py
"""
Availability codec and slot matching
"""

from datetime import date, time

import pytest
from pydantic import ValidationError as PydanticValidationError

from mentormatch.errors import ValidationError
from mentormatch.schemas.availability import Availability, Weekday
from mentormatch.services.availability import (
    TIME_SLOTS,
    contains_slot,
    is_group_slot_viable,
    is_slot_viable,
    parse_time_slot,
    weekday_of,
)

MONDAY = date(2025, 3, 10)
TUESDAY = date(2025, 3, 11)
SUNDAY = date(2025, 3, 16)


def window(days, start="09:00", end="12:00"):
    return Availability.model_validate({"days": days, "startTime": start, "endTime": end})


# ======================
# CODEC
# ======================

def test_storage_form_is_canonical():
    availability = window(["friday", "Monday"], "09:00", "17:30")

    assert availability.to_storage() == {
        "days": ["Monday", "Friday"],
        "startTime": "09:00",
        "endTime": "17:30",
    }


def test_storage_round_trip_preserves_value():
    availability = window(["Monday", "Wednesday"])

    assert Availability.from_storage(availability.to_storage()) == availability


def test_seconds_are_accepted_on_input():
    availability = window(["Monday"], "09:00:00", "10:00:00")

    assert availability.start_time == time(9, 0)
    assert availability.to_storage()["endTime"] == "10:00"


def test_days_as_string_rejected():
    with pytest.raises(PydanticValidationError):
        window("Monday")


def test_duplicate_days_rejected():
    with pytest.raises(PydanticValidationError):
        window(["Monday", "monday"])


def test_unknown_day_rejected():
    with pytest.raises(PydanticValidationError):
        window(["Funday"])


def test_window_must_be_ordered():
    with pytest.raises(PydanticValidationError):
        window(["Monday"], "12:00", "09:00")


def test_unknown_keys_rejected():
    with pytest.raises(PydanticValidationError):
        Availability.model_validate(
            {"days": ["Monday"], "startTime": "09:00", "endTime": "10:00", "timezone": "UTC"}
        )


def test_from_storage_treats_other_shapes_as_unavailable():
    assert Availability.from_storage(None) is None
    assert Availability.from_storage('{"days": ["Monday"], "startTime": "09:00", "endTime": "12:00"}') is None
    assert Availability.from_storage({"days": "Monday", "startTime": "09:00", "endTime": "12:00"}) is None


def test_empty_days_allowed_but_never_available():
    availability = window([])

    assert availability.days == frozenset()
    assert contains_slot(availability, MONDAY, time(9, 0), time(10, 0)) is False


# ======================
# CONTAINS SLOT
# ======================

def test_weekday_of_uses_calendar_day():
    assert weekday_of(MONDAY) == Weekday.MONDAY
    assert weekday_of(SUNDAY) == Weekday.SUNDAY


def test_contains_slot_inside_window():
    availability = window(["Monday"])

    assert contains_slot(availability, MONDAY, time(9, 0), time(10, 0)) is True
    assert contains_slot(availability, MONDAY, time(11, 0), time(12, 0)) is True


def test_contains_slot_end_past_window():
    """Right day, but 13:00-14:00 ends after a 09:00-12:00 window"""
    availability = window(["Monday"])

    assert contains_slot(availability, MONDAY, time(13, 0), time(14, 0)) is False


def test_contains_slot_wrong_day():
    availability = window(["Monday"])

    assert contains_slot(availability, TUESDAY, time(9, 0), time(10, 0)) is False


def test_contains_slot_missing_availability():
    assert contains_slot(None, MONDAY, time(9, 0), time(10, 0)) is False


# ======================
# VIABILITY
# ======================

def test_slot_viable_needs_both_parties():
    mentor = window(["Monday"], "09:00", "12:00")
    mentee = window(["Monday"], "10:00", "17:00")

    assert is_slot_viable(mentor, mentee, MONDAY, time(10, 0), time(11, 0)) is True
    assert is_slot_viable(mentor, mentee, MONDAY, time(9, 0), time(10, 0)) is False
    assert is_slot_viable(mentor, None, MONDAY, time(10, 0), time(11, 0)) is False
    assert is_slot_viable(None, mentee, MONDAY, time(10, 0), time(11, 0)) is False


def test_group_slot_viable_when_any_mentor_free():
    mentee = window(["Monday"], "09:00", "17:00")
    mornings = window(["Monday"], "09:00", "12:00")
    afternoons = window(["Monday"], "13:00", "17:00")

    assert is_group_slot_viable([mornings, afternoons], mentee, MONDAY, time(14, 0), time(15, 0)) is True
    assert is_group_slot_viable([mornings, None], mentee, MONDAY, time(14, 0), time(15, 0)) is False
    assert is_group_slot_viable([], mentee, MONDAY, time(9, 0), time(10, 0)) is False


def test_group_slot_requires_mentee():
    mornings = window(["Monday"], "09:00", "12:00")

    assert is_group_slot_viable([mornings], None, MONDAY, time(9, 0), time(10, 0)) is False


# ======================
# TIME SLOTS
# ======================

def test_parse_time_slot():
    assert parse_time_slot("13:00-14:00") == (time(13, 0), time(14, 0))


@pytest.mark.parametrize("label", ["", "9-10", "10:00-09:00", "10:00"])
def test_parse_time_slot_invalid(label):
    with pytest.raises(ValidationError):
        parse_time_slot(label)


def test_fixed_slots_skip_lunch_hour():
    starts = [parse_time_slot(label)[0] for label in TIME_SLOTS]

    assert time(12, 0) not in starts
    assert starts[0] == time(9, 0)
    assert parse_time_slot(TIME_SLOTS[-1])[1] == time(17, 0)
