# mentormatch/services/booking.py
"""
Same-day booking checks and the bookable slot listing built on them.

Blocking is coarse on purpose: a user with a scheduled session on a calendar
day cannot book another session that day, whatever the clock ranges.
"""

import logging
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

from sqlalchemy import or_
from sqlalchemy.orm import Session

from mentormatch.crud import profile as profile_crud
from mentormatch.errors import RoleNotPermittedError, ValidationError
from mentormatch.models.mentorship import MentorshipRequest
from mentormatch.models.session import Session as SessionModel, SessionStatus
from mentormatch.models.user import User, UserRole
from mentormatch.services.availability import TIME_SLOTS, is_group_slot_viable, parse_time_slot

logger = logging.getLogger(__name__)

MAX_CANDIDATE_MENTORS = 20


def _session_date(session) -> date:
    return session.start_time.date()


def is_date_booked(existing_sessions: Iterable, candidate_date: date) -> bool:
    """True if any scheduled session starts on the candidate's calendar date."""
    return any(
        session.status == SessionStatus.SCHEDULED and _session_date(session) == candidate_date
        for session in existing_sessions
    )


def booked_dates(existing_sessions: Iterable) -> List[date]:
    return sorted({
        _session_date(session)
        for session in existing_sessions
        if session.status == SessionStatus.SCHEDULED
    })


def sessions_for_user(db: Session, user_id: int, status: Optional[SessionStatus] = None) -> List[SessionModel]:
    """Every session the user takes part in, as mentor or mentee, across all requests."""
    query = (
        db.query(SessionModel)
        .join(MentorshipRequest, SessionModel.request_id == MentorshipRequest.id)
        .filter(or_(MentorshipRequest.mentor_id == user_id, MentorshipRequest.mentee_id == user_id))
    )
    if status is not None:
        query = query.filter(SessionModel.status == status)
    return query.order_by(SessionModel.start_time.desc(), SessionModel.id.desc()).all()


def get_booked_dates(db: Session, user: User) -> List[date]:
    return booked_dates(sessions_for_user(db, user.id, SessionStatus.SCHEDULED))


def bookable_slots(
    db: Session,
    mentee: User,
    day: date,
    mentor_ids: Sequence[int],
) -> Dict:
    """
    Offer each fixed time slot on ``day`` to a mentee exploring mentors.

    A slot is viable when the mentee has nothing scheduled that day, the
    mentee's window covers it, and at least one of the candidate mentors'
    windows covers it. Unknown ids and non-mentors count as unavailable.
    """
    if mentee.role != UserRole.MENTEE:
        raise RoleNotPermittedError("Only mentees can search for bookable slots")
    if not mentor_ids:
        raise ValidationError("mentorIds: select at least one mentor")
    if len(mentor_ids) > MAX_CANDIDATE_MENTORS:
        raise ValidationError(f"mentorIds: select at most {MAX_CANDIDATE_MENTORS} mentors")

    mentee_availability = profile_crud.get_availability(db, mentee.id)
    mentor_availabilities = list(profile_crud.get_mentor_availabilities(db, mentor_ids).values())
    date_booked = is_date_booked(sessions_for_user(db, mentee.id, SessionStatus.SCHEDULED), day)

    slots = []
    for label in TIME_SLOTS:
        start, end = parse_time_slot(label)
        viable = not date_booked and is_group_slot_viable(
            mentor_availabilities, mentee_availability, day, start, end
        )
        slots.append({
            "label": label,
            "start_time": start.strftime("%H:%M"),
            "end_time": end.strftime("%H:%M"),
            "viable": viable,
        })

    logger.debug(
        "Computed %d slots for mentee %s on %s (date booked: %s)",
        len(slots),
        mentee.id,
        day.isoformat(),
        date_booked,
    )
    return {"day": day, "date_booked": date_booked, "slots": slots}
