# mentormatch/models/__init__.py
# Import models in dependency order
from .user import User, UserProfile, UserRole
from .skill import Skill, UserSkill
from .mentorship import MentorshipRequest, RequestStatus
from .session import Session, SessionStatus
from .rating import Rating

__all__ = [
    "User",
    "UserProfile",
    "UserRole",
    "Skill",
    "UserSkill",
    "MentorshipRequest",
    "RequestStatus",
    "Session",
    "SessionStatus",
    "Rating",
]
