# mentormatch/schemas/__init__.py

# Auth schemas
from .auth import Token, TokenData, LoginRequest, RegisterRequest

# Availability codec
from .availability import Availability, Weekday

# Mentorship schemas
from .mentorship import (
    MentorshipRequestCreate,
    MentorshipRequestResponse,
    RequestStatusUpdate,
)
from .session import (
    SessionCreate,
    SessionResponse,
    SessionStatusUpdate,
)
from .rating import RatingCreate, RatingResponse, RatingSummary

# Profile schemas
from .user import ProfileCreate, ProfileUpdate, ProfileResponse, MentorSearchResult

__all__ = [
    "Token",
    "TokenData",
    "LoginRequest",
    "RegisterRequest",
    "Availability",
    "Weekday",
    "MentorshipRequestCreate",
    "MentorshipRequestResponse",
    "RequestStatusUpdate",
    "SessionCreate",
    "SessionResponse",
    "SessionStatusUpdate",
    "RatingCreate",
    "RatingResponse",
    "RatingSummary",
    "ProfileCreate",
    "ProfileUpdate",
    "ProfileResponse",
    "MentorSearchResult",
]
