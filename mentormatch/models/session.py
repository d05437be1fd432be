# mentormatch/models/session.py
import enum

from sqlalchemy import Column, Integer, Text, ForeignKey, DateTime, TIMESTAMP, Enum, CheckConstraint, func
from sqlalchemy.orm import relationship
from mentormatch.database import Base


class SessionStatus(str, enum.Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Session(Base):
    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, index=True)
    request_id = Column(Integer, ForeignKey("mentorship_requests.id"), nullable=False, index=True)
    # Naive local wall-clock times, exactly as booked.
    start_time = Column(DateTime, nullable=False, index=True)
    end_time = Column(DateTime, nullable=False)
    status = Column(
        Enum(SessionStatus, native_enum=False, length=20, values_callable=lambda s: [m.value for m in s]),
        default=SessionStatus.SCHEDULED,
        nullable=False,
    )
    notes = Column(Text)
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, onupdate=func.now())

    __table_args__ = (
        CheckConstraint("start_time < end_time", name="check_session_time_order"),
    )

    # Relationships
    request = relationship("MentorshipRequest", back_populates="sessions")
    ratings = relationship("Rating", back_populates="session")

    @property
    def mentor_id(self):
        return self.request.mentor_id if self.request else None

    @property
    def mentee_id(self):
        return self.request.mentee_id if self.request else None
