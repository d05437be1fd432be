# mentormatch/crud/rating.py
"""
Rating CRUD Operations
"""

from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from mentormatch.models.rating import Rating


def create_rating(
    db: Session,
    session_id: int,
    rater_id: int,
    rated_id: int,
    rating: int,
    comment: Optional[str] = None
) -> Rating:
    """
    Create a new rating for a completed session.

    Raises:
        ValueError: If rating is out of range
    """
    if not (1 <= rating <= 5):
        raise ValueError("Rating must be between 1 and 5")

    db_rating = Rating(
        session_id=session_id,
        rater_id=rater_id,
        rated_id=rated_id,
        rating=rating,
        comment=comment
    )

    db.add(db_rating)
    db.flush()
    return db_rating


def get_rating_by_session_and_rater(db: Session, session_id: int, rater_id: int) -> Optional[Rating]:
    return db.query(Rating).filter(
        Rating.session_id == session_id,
        Rating.rater_id == rater_id
    ).first()


def get_ratings_for_user(
    db: Session,
    rated_id: int,
    limit: int = 50,
    offset: int = 0
) -> List[Rating]:
    """Ratings received by a user, newest first."""
    return (
        db.query(Rating)
        .filter(Rating.rated_id == rated_id)
        .order_by(Rating.created_at.desc(), Rating.id.desc())
        .limit(limit)
        .offset(offset)
        .all()
    )


def get_rating_values(db: Session, rated_id: int) -> List[int]:
    return [value for (value,) in db.query(Rating.rating).filter(Rating.rated_id == rated_id).all()]


def get_rating_distribution(db: Session, rated_id: int) -> Dict[int, int]:
    """
    Count of ratings received per star value: {1: count, 2: count, ...}
    """
    distribution = {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}

    results = db.query(
        Rating.rating,
        func.count(Rating.id).label('count')
    ).filter(
        Rating.rated_id == rated_id
    ).group_by(
        Rating.rating
    ).all()

    for rating, count in results:
        distribution[rating] = count

    return distribution
