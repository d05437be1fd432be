# tests/test_booking.py
"""
Same-day booking checks and bookable slot listing
"""

from datetime import date, datetime
from types import SimpleNamespace

import pytest

from mentormatch.errors import RoleNotPermittedError, ValidationError
from mentormatch.models.mentorship import MentorshipRequest, RequestStatus
from mentormatch.models.session import Session, SessionStatus
from mentormatch.models.user import UserRole
from mentormatch.services import booking

MONDAY = date(2025, 3, 10)
MONDAY_MORNINGS = {"days": ["Monday"], "startTime": "09:00", "endTime": "12:00"}


def fake_session(start, status=SessionStatus.SCHEDULED):
    return SimpleNamespace(start_time=start, status=status)


def book(db_session, mentee, mentor, start, end, status=SessionStatus.SCHEDULED):
    request = MentorshipRequest(mentee_id=mentee.id, mentor_id=mentor.id, status=RequestStatus.ACCEPTED)
    db_session.add(request)
    db_session.flush()
    session = Session(request_id=request.id, start_time=start, end_time=end, status=status)
    db_session.add(session)
    db_session.commit()
    return session


# ======================
# PURE CHECKS
# ======================

def test_date_booked_ignores_time_range():
    sessions = [fake_session(datetime(2025, 3, 10, 9, 0))]

    assert booking.is_date_booked(sessions, date(2025, 3, 10)) is True
    assert booking.is_date_booked(sessions, date(2025, 3, 11)) is False


def test_cancelled_and_completed_sessions_do_not_block():
    sessions = [
        fake_session(datetime(2025, 3, 10, 9, 0), SessionStatus.CANCELLED),
        fake_session(datetime(2025, 3, 10, 14, 0), SessionStatus.COMPLETED),
    ]

    assert booking.is_date_booked(sessions, date(2025, 3, 10)) is False


def test_no_sessions_never_booked():
    assert booking.is_date_booked([], MONDAY) is False


def test_booked_dates_sorted_and_unique():
    sessions = [
        fake_session(datetime(2025, 3, 12, 9, 0)),
        fake_session(datetime(2025, 3, 10, 15, 0)),
        fake_session(datetime(2025, 3, 10, 9, 0)),
        fake_session(datetime(2025, 3, 11, 9, 0), SessionStatus.CANCELLED),
    ]

    assert booking.booked_dates(sessions) == [date(2025, 3, 10), date(2025, 3, 12)]


# ======================
# DATABASE-BACKED
# ======================

def test_booked_dates_for_user_cover_both_roles(db_session, mentor, mentee, make_user):
    other_mentee = make_user("Ola Other", UserRole.MENTEE)
    book(db_session, mentee, mentor, datetime(2025, 3, 10, 9, 0), datetime(2025, 3, 10, 10, 0))
    book(db_session, other_mentee, mentor, datetime(2025, 3, 12, 9, 0), datetime(2025, 3, 12, 10, 0))

    assert booking.get_booked_dates(db_session, mentee) == [date(2025, 3, 10)]
    assert booking.get_booked_dates(db_session, mentor) == [date(2025, 3, 10), date(2025, 3, 12)]


def test_sessions_for_user_filters_status(db_session, mentor, mentee):
    book(db_session, mentee, mentor, datetime(2025, 3, 10, 9, 0), datetime(2025, 3, 10, 10, 0))
    book(
        db_session, mentee, mentor,
        datetime(2025, 3, 11, 9, 0), datetime(2025, 3, 11, 10, 0),
        status=SessionStatus.CANCELLED,
    )

    assert len(booking.sessions_for_user(db_session, mentee.id)) == 2
    scheduled = booking.sessions_for_user(db_session, mentee.id, SessionStatus.SCHEDULED)
    assert [s.start_time for s in scheduled] == [datetime(2025, 3, 10, 9, 0)]


def test_bookable_slots_any_mentor(db_session, mentee, make_user):
    morning_mentor = make_user("Mo Morning", UserRole.MENTOR, availability=MONDAY_MORNINGS)
    afternoon_mentor = make_user(
        "Al Afternoon", UserRole.MENTOR,
        availability={"days": ["Monday"], "startTime": "13:00", "endTime": "15:00"},
    )

    result = booking.bookable_slots(
        db_session, mentee=mentee, day=MONDAY, mentor_ids=[morning_mentor.id, afternoon_mentor.id]
    )

    viable = [slot["label"] for slot in result["slots"] if slot["viable"]]
    assert result["date_booked"] is False
    assert viable == ["09:00-10:00", "10:00-11:00", "11:00-12:00", "13:00-14:00", "14:00-15:00"]


def test_bookable_slots_none_when_day_booked(db_session, mentor, mentee):
    book(db_session, mentee, mentor, datetime(2025, 3, 10, 16, 0), datetime(2025, 3, 10, 17, 0))

    result = booking.bookable_slots(db_session, mentee=mentee, day=MONDAY, mentor_ids=[mentor.id])

    assert result["date_booked"] is True
    assert not any(slot["viable"] for slot in result["slots"])


def test_bookable_slots_ignore_non_mentor_ids(db_session, mentee, make_user):
    other_mentee = make_user("Ola Other", UserRole.MENTEE, availability=MONDAY_MORNINGS)

    result = booking.bookable_slots(db_session, mentee=mentee, day=MONDAY, mentor_ids=[other_mentee.id, 999])

    assert not any(slot["viable"] for slot in result["slots"])


def test_bookable_slots_mentee_only(db_session, mentor):
    with pytest.raises(RoleNotPermittedError):
        booking.bookable_slots(db_session, mentee=mentor, day=MONDAY, mentor_ids=[mentor.id])


def test_bookable_slots_mentor_count_bounds(db_session, mentee):
    with pytest.raises(ValidationError):
        booking.bookable_slots(db_session, mentee=mentee, day=MONDAY, mentor_ids=[])
    with pytest.raises(ValidationError):
        booking.bookable_slots(
            db_session, mentee=mentee, day=MONDAY, mentor_ids=list(range(1, booking.MAX_CANDIDATE_MENTORS + 2))
        )
