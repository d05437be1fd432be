# mentormatch/services/rating_service.py
"""
Rating aggregation.

Averages are computed from the current rating rows on every read; nothing
is cached or stored, so there is nothing to invalidate when a rating lands.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable, Optional

from sqlalchemy.orm import Session

from mentormatch.crud import rating as rating_crud

_ONE_DECIMAL = Decimal("0.1")


def average_rating(ratings: Iterable[int]) -> Optional[float]:
    """Mean of the rating values rounded half-up to one decimal, or None when there are none."""
    values = [int(value) for value in ratings]
    if not values:
        return None
    mean = Decimal(sum(values)) / Decimal(len(values))
    return float(mean.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def get_average_rating(db: Session, user_id: int) -> Optional[float]:
    return average_rating(rating_crud.get_rating_values(db, user_id))


def get_rating_summary(db: Session, user_id: int, limit: int = 50) -> Dict[str, Any]:
    """
    Everything a profile page shows about the ratings a user received.

    Args:
        db: Database session
        user_id: The rated user
        limit: Maximum individual reviews to include

    Returns:
        Dictionary with average, count, per-star distribution and reviews
    """
    distribution = rating_crud.get_rating_distribution(db, user_id)
    reviews = rating_crud.get_ratings_for_user(db, user_id, limit=limit)

    return {
        "user_id": user_id,
        "average_rating": get_average_rating(db, user_id),
        "total_ratings": sum(distribution.values()),
        "rating_distribution": distribution,
        "reviews": [
            {
                "id": r.id,
                "session_id": r.session_id,
                "rater_id": r.rater_id,
                "rater_name": r.rater.name if r.rater else None,
                "rating": r.rating,
                "comment": r.comment,
                "created_at": r.created_at,
            }
            for r in reviews
        ],
    }
