from decimal import Decimal
from typing import List, Optional

from pydantic import Field, field_validator

from mentormatch.models.user import UserRole
from mentormatch.schemas.availability import Availability
from mentormatch.schemas.base import CamelModel
from mentormatch.schemas.rating import ReviewDisplay


# ======================
# USER SCHEMAS
# ======================

class User(CamelModel):
    id: int
    name: str
    email: str
    role: UserRole


class NameUpdate(CamelModel):
    name: str = Field(..., min_length=2, max_length=100)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v


# ======================
# PROFILE SCHEMAS
# ======================

class SkillEntry(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    proficiency_level: str = "intermediate"


class ProfileCreate(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    department: Optional[str] = Field(None, max_length=150)
    bio: Optional[str] = None
    experience: Optional[str] = Field(None, max_length=255)
    hourly_rate: Optional[Decimal] = Field(None, ge=0)
    availability: Optional[Availability] = None
    skills: List[SkillEntry] = []


class ProfileUpdate(CamelModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    department: Optional[str] = Field(None, max_length=150)
    bio: Optional[str] = None
    experience: Optional[str] = Field(None, max_length=255)
    hourly_rate: Optional[Decimal] = Field(None, ge=0)
    availability: Optional[Availability] = None
    skills: Optional[List[SkillEntry]] = None


class ProfileResponse(CamelModel):
    user_id: int
    name: str
    role: UserRole
    first_name: str
    last_name: str
    department: Optional[str] = None
    bio: Optional[str] = None
    experience: Optional[str] = None
    hourly_rate: Optional[Decimal] = None
    availability: Optional[Availability] = None
    skills: List[SkillEntry] = []
    average_rating: Optional[float] = None
    reviews: List[ReviewDisplay] = []


class MentorSearchResult(CamelModel):
    user_id: int
    name: str
    department: Optional[str] = None
    hourly_rate: Optional[Decimal] = None
    availability: Optional[Availability] = None
    skills: List[SkillEntry] = []
    average_rating: Optional[float] = None
