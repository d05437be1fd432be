import enum

from sqlalchemy import Column, Integer, String, Boolean, Text, Numeric, ForeignKey, TIMESTAMP, JSON, Enum, func
from sqlalchemy.orm import relationship
from mentormatch.database import Base


class UserRole(str, enum.Enum):
    MENTOR = "mentor"
    MENTEE = "mentee"


# ---------------- USER (AUTH TABLE) ----------------
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(
        Enum(UserRole, native_enum=False, length=20, values_callable=lambda roles: [r.value for r in roles]),
        nullable=False,
    )
    is_active = Column(Boolean, default=True)
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, onupdate=func.now())

    profile = relationship("UserProfile", back_populates="user", uselist=False, cascade="all, delete-orphan")
    user_skills = relationship("UserSkill", back_populates="user", cascade="all, delete-orphan")
    requests_sent = relationship(
        "MentorshipRequest", foreign_keys="MentorshipRequest.mentee_id", back_populates="mentee"
    )
    requests_received = relationship(
        "MentorshipRequest", foreign_keys="MentorshipRequest.mentor_id", back_populates="mentor"
    )


# ---------------- PROFILE TABLE ----------------
class UserProfile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    department = Column(String(150))
    bio = Column(Text)
    experience = Column(String(255))
    hourly_rate = Column(Numeric(10, 2))
    # Always written through schemas.availability.Availability.to_storage()
    availability = Column(JSON)
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="profile")
