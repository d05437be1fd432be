# mentormatch/api/mentorship.py
"""
Mentorship API

Endpoints:
- POST   /mentorship/requests              - Mentee requests a mentor
- GET    /mentorship/requests              - Requests sent or received
- PATCH  /mentorship/requests/{id}         - Mentor accepts/rejects a pending request
- DELETE /mentorship/requests/{id}         - Mentee withdraws a pending request
- POST   /mentorship/sessions              - Schedule a session for an accepted request
- GET    /mentorship/sessions              - Sessions the caller takes part in
- PATCH  /mentorship/sessions/{id}         - Complete/cancel a session or edit its notes
- POST   /mentorship/ratings               - Rate the other participant of a completed session
- GET    /mentorship/ratings/{user_id}     - Rating summary for a user
- GET    /mentorship/booking/slots         - Fixed time slots for a day, flagged viable or not
- GET    /mentorship/booking/dates         - Days already holding a scheduled session

Rule violations raised by the services propagate to the handlers in
mentormatch.errors; nothing is caught here.
"""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from mentormatch.database import get_db
from mentormatch.models.mentorship import MentorshipRequest
from mentormatch.models.session import Session as SessionModel
from mentormatch.models.user import User
from mentormatch.schemas.availability import Availability
from mentormatch.schemas.mentorship import (
    MentorSummary,
    MentorshipRequestCreate,
    MentorshipRequestResponse,
    PartySummary,
    RequestStatusUpdate,
)
from mentormatch.schemas.rating import RatingCreate, RatingResponse, RatingSummary
from mentormatch.schemas.session import (
    BookableSlotsResponse,
    BookedDatesResponse,
    SessionCreate,
    SessionResponse,
    SessionStatusUpdate,
)
from mentormatch.services import booking, mentorship_service, rating_service
from mentormatch.utils.security import get_current_user

router = APIRouter(prefix="/mentorship", tags=["mentorship"])


# ======================
# HELPER FUNCTIONS
# ======================
def _party(user: User) -> PartySummary:
    return PartySummary(id=user.id, name=user.name or "")


def _mentor_summary(mentor: User) -> MentorSummary:
    profile = mentor.profile
    return MentorSummary(
        id=mentor.id,
        name=mentor.name or "",
        skills=sorted(us.skill.name for us in mentor.user_skills if us.skill),
        availability=Availability.from_storage(profile.availability) if profile else None,
    )


def _request_response(request: MentorshipRequest) -> MentorshipRequestResponse:
    return MentorshipRequestResponse(
        id=request.id,
        mentee_id=request.mentee_id,
        mentor_id=request.mentor_id,
        message=request.message,
        status=request.status,
        created_at=request.created_at,
        mentor=_mentor_summary(request.mentor) if request.mentor else None,
        mentee=_party(request.mentee) if request.mentee else None,
    )


def _session_response(session: SessionModel) -> SessionResponse:
    request = session.request
    return SessionResponse(
        id=session.id,
        request_id=session.request_id,
        start_time=session.start_time,
        end_time=session.end_time,
        status=session.status,
        notes=session.notes,
        mentor_id=request.mentor_id,
        mentee_id=request.mentee_id,
        mentor=_party(request.mentor) if request.mentor else None,
        mentee=_party(request.mentee) if request.mentee else None,
    )


# ======================
# MENTORSHIP REQUESTS
# ======================
@router.post("/requests", response_model=MentorshipRequestResponse, status_code=status.HTTP_201_CREATED)
def create_request(
    payload: MentorshipRequestCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Send a mentorship request (mentees only)."""
    request = mentorship_service.create_request(
        db,
        mentee=current_user,
        mentor_id=payload.mentor_id,
        message=payload.message,
    )
    return _request_response(request)


@router.get("/requests", response_model=List[MentorshipRequestResponse])
def get_requests(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Requests involving the caller, with the mentor's skills and availability."""
    return [_request_response(r) for r in mentorship_service.list_requests(db, current_user)]


@router.patch("/requests/{request_id}", response_model=MentorshipRequestResponse)
def update_request_status(
    request_id: int,
    payload: RequestStatusUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    request = mentorship_service.update_request_status(
        db,
        mentor=current_user,
        request_id=request_id,
        new_status=payload.status,
    )
    return _request_response(request)


@router.delete("/requests/{request_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_request(
    request_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    mentorship_service.delete_request(db, mentee=current_user, request_id=request_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ======================
# SESSIONS
# ======================
@router.post("/sessions", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
def create_session(
    payload: SessionCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Schedule a session; times are naive local "YYYY-MM-DD HH:MM:SS" strings."""
    session = mentorship_service.create_session(
        db,
        user=current_user,
        request_id=payload.request_id,
        start_time=payload.start_time,
        end_time=payload.end_time,
    )
    return _session_response(session)


@router.get("/sessions", response_model=List[SessionResponse])
def get_sessions(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return [_session_response(s) for s in mentorship_service.list_sessions(db, current_user)]


@router.patch("/sessions/{session_id}", response_model=SessionResponse)
def update_session(
    session_id: int,
    payload: SessionStatusUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    session = mentorship_service.update_session(
        db,
        user=current_user,
        session_id=session_id,
        new_status=payload.status,
        notes=payload.notes,
    )
    return _session_response(session)


# ======================
# RATINGS
# ======================
@router.post("/ratings", response_model=RatingResponse, status_code=status.HTTP_201_CREATED)
def create_rating(
    payload: RatingCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return mentorship_service.create_rating(
        db,
        rater=current_user,
        session_id=payload.session_id,
        rated_id=payload.rated_id,
        rating=payload.rating,
        comment=payload.comment,
    )


@router.get("/ratings/{user_id}", response_model=RatingSummary)
def get_rating_summary(
    user_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return rating_service.get_rating_summary(db, user_id)


# ======================
# BOOKING
# ======================
@router.get("/booking/slots", response_model=BookableSlotsResponse)
def get_bookable_slots(
    day: date = Query(..., alias="date"),
    mentor_ids: List[int] = Query(..., alias="mentorIds"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Slots on ``date`` the caller could book with at least one of ``mentorIds``."""
    return booking.bookable_slots(db, mentee=current_user, day=day, mentor_ids=mentor_ids)


@router.get("/booking/dates", response_model=BookedDatesResponse)
def get_booked_dates(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return {"dates": booking.get_booked_dates(db, current_user)}
