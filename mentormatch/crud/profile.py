# mentormatch/crud/profile.py
"""
Profile, skill and availability persistence.
"""

from typing import Dict, Iterable, List, Optional

from sqlalchemy import and_, func, select
from sqlalchemy.orm import Session

from mentormatch.models.rating import Rating
from mentormatch.models.skill import Skill, UserSkill
from mentormatch.models.user import User, UserProfile, UserRole
from mentormatch.schemas.availability import Availability

_PROFILE_FIELDS = ("first_name", "last_name", "department", "bio", "experience", "hourly_rate")


def get_profile(db: Session, user_id: int) -> Optional[UserProfile]:
    return db.query(UserProfile).filter(UserProfile.user_id == user_id).first()


def create_profile(db: Session, user_id: int, data: dict) -> UserProfile:
    db_profile = UserProfile(user_id=user_id, **{key: data.get(key) for key in _PROFILE_FIELDS})
    availability = data.get("availability")
    db_profile.availability = availability.to_storage() if availability is not None else None
    db.add(db_profile)
    db.flush()
    return db_profile


def update_profile(db: Session, db_profile: UserProfile, data: dict) -> UserProfile:
    """Apply only the fields present in ``data`` (``exclude_unset`` dump of the update body)."""
    for key in _PROFILE_FIELDS:
        if key in data:
            setattr(db_profile, key, data[key])
    if "availability" in data:
        availability = data["availability"]
        db_profile.availability = availability.to_storage() if availability is not None else None
    db.flush()
    return db_profile


def get_availability(db: Session, user_id: int) -> Optional[Availability]:
    stored = db.query(UserProfile.availability).filter(UserProfile.user_id == user_id).scalar()
    return Availability.from_storage(stored)


def get_mentor_availabilities(db: Session, mentor_ids: Iterable[int]) -> Dict[int, Optional[Availability]]:
    rows = (
        db.query(UserProfile.user_id, UserProfile.availability)
        .join(User, User.id == UserProfile.user_id)
        .filter(UserProfile.user_id.in_(list(mentor_ids)), User.role == UserRole.MENTOR)
        .all()
    )
    return {user_id: Availability.from_storage(stored) for user_id, stored in rows}


# ======================
# SKILLS
# ======================

def get_or_create_skill(db: Session, name: str) -> Skill:
    normalized = name.strip()
    skill = db.query(Skill).filter(func.lower(Skill.name) == normalized.lower()).first()
    if skill:
        return skill
    skill = Skill(name=normalized)
    db.add(skill)
    db.flush()
    return skill


def replace_user_skills(db: Session, user_id: int, skills: Iterable) -> List[UserSkill]:
    """Swap the user's skill set for ``skills`` (entries with ``name`` and ``proficiency_level``)."""
    db.query(UserSkill).filter(UserSkill.user_id == user_id).delete(synchronize_session=False)
    created = {}
    for entry in skills:
        skill = get_or_create_skill(db, entry.name)
        if skill.id in created:
            continue
        created[skill.id] = UserSkill(
            user_id=user_id,
            skill_id=skill.id,
            proficiency_level=entry.proficiency_level,
        )
        db.add(created[skill.id])
    db.flush()
    return list(created.values())


def get_user_skills(db: Session, user_id: int) -> List[UserSkill]:
    return (
        db.query(UserSkill)
        .join(Skill, Skill.id == UserSkill.skill_id)
        .filter(UserSkill.user_id == user_id)
        .order_by(Skill.name)
        .all()
    )


def list_skill_names(db: Session) -> List[str]:
    return [name for (name,) in db.query(Skill.name).order_by(Skill.name).all()]


# ======================
# MENTOR SEARCH
# ======================

def search_mentors(
    db: Session,
    skills: Optional[List[str]] = None,
    department: Optional[str] = None,
    min_rating: Optional[float] = None,
    limit: int = 50,
) -> List[UserProfile]:
    """Mentor profiles matching every skill substring, the department substring and the rating floor."""
    query = (
        db.query(UserProfile)
        .join(User, User.id == UserProfile.user_id)
        .filter(User.role == UserRole.MENTOR, User.is_active.is_(True))
    )

    for skill in skills or []:
        pattern = f"%{skill.strip()}%"
        query = query.filter(
            db.query(UserSkill.id)
            .join(Skill, Skill.id == UserSkill.skill_id)
            .filter(and_(UserSkill.user_id == User.id, Skill.name.ilike(pattern)))
            .exists()
        )

    if department:
        query = query.filter(UserProfile.department.ilike(f"%{department.strip()}%"))

    if min_rating is not None:
        rated_ids = (
            select(Rating.rated_id)
            .group_by(Rating.rated_id)
            .having(func.avg(Rating.rating) >= min_rating)
        )
        query = query.filter(User.id.in_(rated_ids))

    return query.order_by(UserProfile.first_name, UserProfile.last_name).limit(limit).all()
