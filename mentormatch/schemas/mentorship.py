# mentormatch/schemas/mentorship.py
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from mentormatch.models.mentorship import RequestStatus
from mentormatch.schemas.availability import Availability
from mentormatch.schemas.base import CamelModel


# ======================
# REQUEST MODELS
# ======================

class MentorshipRequestCreate(CamelModel):
    mentor_id: int
    message: Optional[str] = Field(None, max_length=1000)


class RequestStatusUpdate(CamelModel):
    # A request only ever moves out of "pending" into one of these.
    status: Literal["accepted", "rejected"]


# ======================
# RESPONSE MODELS
# ======================

class PartySummary(CamelModel):
    id: int
    name: str


class MentorSummary(PartySummary):
    skills: List[str] = []
    availability: Optional[Availability] = None


class MentorshipRequestResponse(CamelModel):
    id: int
    mentee_id: int
    mentor_id: int
    message: Optional[str] = None
    status: RequestStatus
    created_at: Optional[datetime] = None
    mentor: Optional[MentorSummary] = None
    mentee: Optional[PartySummary] = None
