# mentormatch/api/profile.py
"""
Profile API: the caller's own profile (skills, rate, weekly availability),
public profile pages with ratings, and mentor search.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from mentormatch.crud import profile as profile_crud
from mentormatch.database import commit_or_raise, get_db
from mentormatch.errors import ConflictError, NotFoundOrUnauthorizedError
from mentormatch.models.user import User, UserProfile
from mentormatch.schemas.availability import Availability
from mentormatch.schemas.user import (
    MentorSearchResult,
    ProfileCreate,
    ProfileResponse,
    ProfileUpdate,
    SkillEntry,
)
from mentormatch.services import rating_service
from mentormatch.utils.security import get_current_user

router = APIRouter(prefix="/profile", tags=["profile"])


def _skills(db: Session, user_id: int) -> List[SkillEntry]:
    return [
        SkillEntry(name=us.skill.name, proficiency_level=us.proficiency_level or "intermediate")
        for us in profile_crud.get_user_skills(db, user_id)
    ]


def _profile_response(db: Session, profile: UserProfile) -> ProfileResponse:
    summary = rating_service.get_rating_summary(db, profile.user_id)
    return ProfileResponse(
        user_id=profile.user_id,
        name=profile.user.name,
        role=profile.user.role,
        first_name=profile.first_name,
        last_name=profile.last_name,
        department=profile.department,
        bio=profile.bio,
        experience=profile.experience,
        hourly_rate=profile.hourly_rate,
        availability=Availability.from_storage(profile.availability),
        skills=_skills(db, profile.user_id),
        average_rating=summary["average_rating"],
        reviews=summary["reviews"],
    )


@router.post("", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED)
def create_profile(
    payload: ProfileCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    if profile_crud.get_profile(db, current_user.id):
        raise ConflictError("Profile already exists")

    data = payload.model_dump(exclude={"availability", "skills"})
    data["availability"] = payload.availability
    profile = profile_crud.create_profile(db, current_user.id, data)
    profile_crud.replace_user_skills(db, current_user.id, payload.skills)
    commit_or_raise(db, "create profile")
    db.refresh(profile)
    return _profile_response(db, profile)


@router.put("", response_model=ProfileResponse)
def update_profile(
    payload: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update only the fields present in the body; ``skills`` replaces the whole set."""
    profile = profile_crud.get_profile(db, current_user.id)
    if not profile:
        raise NotFoundOrUnauthorizedError("Profile not found")

    data = payload.model_dump(exclude_unset=True, exclude={"availability", "skills"})
    if "availability" in payload.model_fields_set:
        data["availability"] = payload.availability
    profile_crud.update_profile(db, profile, data)
    if payload.skills is not None:
        profile_crud.replace_user_skills(db, current_user.id, payload.skills)
    commit_or_raise(db, "update profile")
    db.refresh(profile)
    return _profile_response(db, profile)


@router.get("/skills", response_model=List[str])
def get_all_skills(db: Session = Depends(get_db)):
    return profile_crud.list_skill_names(db)


@router.get("/mentors/search", response_model=List[MentorSearchResult])
def search_mentors(
    skills: Optional[List[str]] = Query(None),
    department: Optional[str] = None,
    rating: Optional[float] = Query(None, ge=1, le=5),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Mentors having every listed skill (substring match), in the department, rated at least ``rating``."""
    profiles = profile_crud.search_mentors(db, skills=skills, department=department, min_rating=rating)
    return [
        MentorSearchResult(
            user_id=p.user_id,
            name=p.user.name,
            department=p.department,
            hourly_rate=p.hourly_rate,
            availability=Availability.from_storage(p.availability),
            skills=_skills(db, p.user_id),
            average_rating=rating_service.get_average_rating(db, p.user_id),
        )
        for p in profiles
    ]


@router.get("/{user_id}", response_model=ProfileResponse)
def get_profile(
    user_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    profile = profile_crud.get_profile(db, user_id)
    if not profile:
        raise NotFoundOrUnauthorizedError("Profile not found")
    return _profile_response(db, profile)
