# mentormatch/services/mentorship_service.py
"""
Mentorship lifecycle: request -> accept/reject -> session -> complete/cancel -> rating.

Every status change is a single conditional UPDATE (or DELETE) filtered on the
row id, the expected prior status and the caller's ownership. The affected row
count decides success, so two racing callers cannot both win. A miss is always
reported as NotFoundOrUnauthorizedError, never as "exists but not yours".
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from mentormatch.config import settings
from mentormatch.crud import profile as profile_crud
from mentormatch.crud import rating as rating_crud
from mentormatch.database import commit_or_raise
from mentormatch.errors import (
    ConflictError,
    NotFoundOrUnauthorizedError,
    RoleNotPermittedError,
    StorageError,
    ValidationError,
)
from mentormatch.models.mentorship import MentorshipRequest, RequestStatus
from mentormatch.models.rating import Rating
from mentormatch.models.session import Session as SessionModel, SessionStatus
from mentormatch.models.user import User, UserRole
from mentormatch.services.availability import is_slot_viable
from mentormatch.services.booking import is_date_booked, sessions_for_user

logger = logging.getLogger(__name__)

# Who may move a scheduled session into each status. Completed and cancelled
# sessions are terminal; "scheduled" -> "scheduled" is a notes-only edit.
SESSION_TRANSITIONS: Dict[SessionStatus, str] = {
    SessionStatus.SCHEDULED: "participant",
    SessionStatus.CANCELLED: "participant",
    SessionStatus.COMPLETED: "mentor",
}

REQUEST_DECISIONS = (RequestStatus.ACCEPTED, RequestStatus.REJECTED)


def _participant_filter(user_id: int):
    return or_(MentorshipRequest.mentor_id == user_id, MentorshipRequest.mentee_id == user_id)


# ======================
# MENTORSHIP REQUESTS
# ======================

def create_request(
    db: Session,
    mentee: User,
    mentor_id: int,
    message: Optional[str] = None,
) -> MentorshipRequest:
    if mentee.role != UserRole.MENTEE:
        raise RoleNotPermittedError("Only mentees can create mentorship requests")

    mentor = db.query(User).filter(
        User.id == mentor_id,
        User.role == UserRole.MENTOR,
        User.is_active.is_(True),
    ).first()
    if not mentor:
        raise NotFoundOrUnauthorizedError("Mentor not found")

    # One open request per mentee/mentor pair.
    existing_pending = db.query(MentorshipRequest.id).filter(
        MentorshipRequest.mentee_id == mentee.id,
        MentorshipRequest.mentor_id == mentor_id,
        MentorshipRequest.status == RequestStatus.PENDING,
    ).first()
    if existing_pending:
        raise ConflictError("You already have a pending request with this mentor")

    request = MentorshipRequest(
        mentee_id=mentee.id,
        mentor_id=mentor_id,
        message=(message.strip() or None) if message else None,
        status=RequestStatus.PENDING,
    )
    db.add(request)
    commit_or_raise(db, "create mentorship request")
    db.refresh(request)

    logger.info("Mentee %s requested mentor %s (request %s)", mentee.id, mentor_id, request.id)
    return request


def list_requests(db: Session, user: User) -> List[MentorshipRequest]:
    """Requests the user sent or received, newest first."""
    return (
        db.query(MentorshipRequest)
        .filter(_participant_filter(user.id))
        .order_by(MentorshipRequest.created_at.desc(), MentorshipRequest.id.desc())
        .all()
    )


def update_request_status(
    db: Session,
    mentor: User,
    request_id: int,
    new_status: RequestStatus,
) -> MentorshipRequest:
    """Accept or reject a pending request addressed to ``mentor``."""
    try:
        new_status = RequestStatus(new_status)
    except ValueError:
        new_status = None
    if new_status not in REQUEST_DECISIONS:
        raise ValidationError("status: must be one of accepted, rejected")

    updated = db.query(MentorshipRequest).filter(
        MentorshipRequest.id == request_id,
        MentorshipRequest.mentor_id == mentor.id,
        MentorshipRequest.status == RequestStatus.PENDING,
    ).update({"status": new_status}, synchronize_session=False)

    if updated != 1:
        db.rollback()
        logger.info("Mentor %s could not move request %s to %s", mentor.id, request_id, new_status.value)
        raise NotFoundOrUnauthorizedError("Request not found or unauthorized")

    commit_or_raise(db, "update mentorship request status")
    logger.info("Mentor %s %s request %s", mentor.id, new_status.value, request_id)
    return db.get(MentorshipRequest, request_id)


def delete_request(db: Session, mentee: User, request_id: int) -> None:
    """Withdraw a request; only its mentee may, and only while it is pending."""
    deleted = db.query(MentorshipRequest).filter(
        MentorshipRequest.id == request_id,
        MentorshipRequest.mentee_id == mentee.id,
        MentorshipRequest.status == RequestStatus.PENDING,
    ).delete(synchronize_session=False)

    if deleted != 1:
        db.rollback()
        raise NotFoundOrUnauthorizedError("Request not found or unauthorized")

    commit_or_raise(db, "delete mentorship request")
    logger.info("Mentee %s withdrew request %s", mentee.id, request_id)


# ======================
# SESSIONS
# ======================

def _validate_session_window(start_time: datetime, end_time: datetime) -> None:
    if start_time >= end_time:
        raise ValidationError("startTime must be before endTime")
    if start_time.date() != end_time.date():
        raise ValidationError("startTime and endTime must fall on the same day")


def create_session(
    db: Session,
    user: User,
    request_id: int,
    start_time: datetime,
    end_time: datetime,
    enforce_booking_rules: Optional[bool] = None,
) -> SessionModel:
    """
    Schedule a session for an accepted request the user is party to.

    The request keeps its "accepted" status; the linked session is what
    records that scheduling happened.
    """
    _validate_session_window(start_time, end_time)

    request = db.query(MentorshipRequest).filter(
        MentorshipRequest.id == request_id,
        MentorshipRequest.status == RequestStatus.ACCEPTED,
        _participant_filter(user.id),
    ).first()
    if not request:
        raise NotFoundOrUnauthorizedError("Request not found or not accepted")

    if enforce_booking_rules is None:
        enforce_booking_rules = settings.ENFORCE_BOOKING_RULES

    if enforce_booking_rules:
        day = start_time.date()
        mentor_availability = profile_crud.get_availability(db, request.mentor_id)
        mentee_availability = profile_crud.get_availability(db, request.mentee_id)
        if not is_slot_viable(mentor_availability, mentee_availability, day, start_time.time(), end_time.time()):
            raise ConflictError("Selected time is outside the mentor's or mentee's availability")
        if is_date_booked(sessions_for_user(db, user.id, SessionStatus.SCHEDULED), day):
            raise ConflictError("You already have a session scheduled on this date")

    session = SessionModel(
        request_id=request.id,
        start_time=start_time,
        end_time=end_time,
        status=SessionStatus.SCHEDULED,
    )
    db.add(session)
    commit_or_raise(db, "create session")
    db.refresh(session)

    logger.info(
        "User %s scheduled session %s for request %s at %s",
        user.id,
        session.id,
        request.id,
        start_time.isoformat(sep=" "),
    )
    return session


def list_sessions(db: Session, user: User) -> List[SessionModel]:
    """Sessions the user takes part in, latest start time first."""
    return sessions_for_user(db, user.id)


def update_session(
    db: Session,
    user: User,
    session_id: int,
    new_status: SessionStatus,
    notes: Optional[str] = None,
) -> SessionModel:
    try:
        new_status = SessionStatus(new_status)
    except ValueError:
        raise ValidationError("status: must be one of scheduled, completed, cancelled")
    if SESSION_TRANSITIONS[new_status] == "mentor":
        owner_filter = MentorshipRequest.mentor_id == user.id
    else:
        owner_filter = _participant_filter(user.id)
    owned_requests = select(MentorshipRequest.id).where(owner_filter)

    values = {"status": new_status}
    if notes is not None:
        values["notes"] = notes

    updated = db.query(SessionModel).filter(
        SessionModel.id == session_id,
        SessionModel.status == SessionStatus.SCHEDULED,
        SessionModel.request_id.in_(owned_requests),
    ).update(values, synchronize_session=False)

    if updated != 1:
        db.rollback()
        logger.info("User %s could not move session %s to %s", user.id, session_id, new_status.value)
        raise NotFoundOrUnauthorizedError("Session not found or unauthorized")

    commit_or_raise(db, "update session")
    logger.info("User %s set session %s to %s", user.id, session_id, new_status.value)
    return db.get(SessionModel, session_id)


# ======================
# RATINGS
# ======================

def _other_participant(request: MentorshipRequest, user_id: int) -> int:
    return request.mentee_id if request.mentor_id == user_id else request.mentor_id


def _completed_session_for(db: Session, user_id: int, session_id: int) -> Tuple[SessionModel, MentorshipRequest]:
    row = (
        db.query(SessionModel, MentorshipRequest)
        .join(MentorshipRequest, SessionModel.request_id == MentorshipRequest.id)
        .filter(
            SessionModel.id == session_id,
            SessionModel.status == SessionStatus.COMPLETED,
            _participant_filter(user_id),
        )
        .first()
    )
    if not row:
        raise NotFoundOrUnauthorizedError("Session not found or not completed")
    return row


def create_rating(
    db: Session,
    rater: User,
    session_id: int,
    rated_id: int,
    rating: int,
    comment: Optional[str] = None,
) -> Rating:
    """Rate the other participant of a completed session, once per session per rater."""
    session, request = _completed_session_for(db, rater.id, session_id)

    if rated_id != _other_participant(request, rater.id):
        raise ValidationError("ratedId: must be the other participant of the session")

    if rating_crud.get_rating_by_session_and_rater(db, session.id, rater.id):
        raise ConflictError("You have already rated this session")

    try:
        db_rating = rating_crud.create_rating(
            db,
            session_id=session.id,
            rater_id=rater.id,
            rated_id=rated_id,
            rating=rating,
            comment=comment,
        )
        db.commit()
    except ValueError as exc:
        db.rollback()
        raise ValidationError(f"rating: {exc}")
    except IntegrityError:
        db.rollback()
        raise ConflictError("You have already rated this session")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create rating for session %s", session_id)
        raise StorageError()

    db.refresh(db_rating)
    logger.info("User %s rated user %s %s/5 for session %s", rater.id, rated_id, rating, session_id)
    return db_rating
