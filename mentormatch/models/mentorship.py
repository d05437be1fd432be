# mentormatch/models/mentorship.py
import enum

from sqlalchemy import Column, Integer, Text, ForeignKey, TIMESTAMP, Enum, func
from sqlalchemy.orm import relationship
from mentormatch.database import Base


class RequestStatus(str, enum.Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class MentorshipRequest(Base):
    __tablename__ = "mentorship_requests"

    id = Column(Integer, primary_key=True, index=True)
    mentee_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    mentor_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    message = Column(Text)
    status = Column(
        Enum(RequestStatus, native_enum=False, length=20, values_callable=lambda s: [m.value for m in s]),
        default=RequestStatus.PENDING,
        nullable=False,
        index=True,
    )
    created_at = Column(TIMESTAMP, server_default=func.now())

    # Relationships
    mentee = relationship("User", foreign_keys=[mentee_id], back_populates="requests_sent")
    mentor = relationship("User", foreign_keys=[mentor_id], back_populates="requests_received")
    sessions = relationship("Session", back_populates="request")
