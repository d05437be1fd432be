from datetime import date, datetime
from typing import Any, List, Optional

from pydantic import field_serializer, field_validator

from mentormatch.models.session import SessionStatus
from mentormatch.schemas.base import CamelModel
from mentormatch.schemas.mentorship import PartySummary

LOCAL_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_local_timestamp(value: Any) -> datetime:
    """Parse a naive local ``YYYY-MM-DD HH:MM:SS`` timestamp (``T`` separator also accepted)."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        try:
            parsed = datetime.strptime(text, LOCAL_TIMESTAMP_FORMAT)
        except ValueError:
            try:
                parsed = datetime.fromisoformat(text)
            except ValueError:
                raise ValueError("must be a local timestamp formatted as YYYY-MM-DD HH:MM:SS")
    else:
        raise ValueError("must be a local timestamp formatted as YYYY-MM-DD HH:MM:SS")

    if parsed.tzinfo is not None:
        raise ValueError("must be a naive local time without a UTC offset")
    return parsed.replace(microsecond=0)


# ======================
# SESSION REQUEST MODELS
# ======================

class SessionCreate(CamelModel):
    request_id: int
    start_time: datetime
    end_time: datetime

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def validate_timestamp(cls, value: Any) -> datetime:
        return parse_local_timestamp(value)


class SessionStatusUpdate(CamelModel):
    status: SessionStatus
    notes: Optional[str] = None


# ======================
# SESSION RESPONSE MODELS
# ======================

class SessionResponse(CamelModel):
    id: int
    request_id: int
    start_time: datetime
    end_time: datetime
    status: SessionStatus
    notes: Optional[str] = None
    mentor_id: Optional[int] = None
    mentee_id: Optional[int] = None
    mentor: Optional[PartySummary] = None
    mentee: Optional[PartySummary] = None

    @field_serializer("start_time", "end_time")
    def serialize_timestamp(self, value: datetime) -> str:
        return value.strftime(LOCAL_TIMESTAMP_FORMAT)


# ======================
# BOOKING MODELS
# ======================

class SlotOption(CamelModel):
    label: str
    start_time: str
    end_time: str
    viable: bool


class BookableSlotsResponse(CamelModel):
    day: date
    date_booked: bool
    slots: List[SlotOption]


class BookedDatesResponse(CamelModel):
    dates: List[date]
