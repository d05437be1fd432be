# mentormatch/schemas/rating.py
"""
Rating Pydantic Schemas
Request/response models with validation
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field, field_validator

from mentormatch.schemas.base import CamelModel


class RatingCreate(CamelModel):
    """Rating submitted by one participant of a completed session"""
    session_id: int = Field(..., description="Session identifier")
    rated_id: int = Field(..., description="The other participant of the session")
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5 stars")
    comment: Optional[str] = Field(None, max_length=1000, description="Review comment (max 1000 chars)")

    @field_validator("comment")
    @classmethod
    def validate_comment(cls, v):
        """Blank comments are stored as no comment"""
        if v is None:
            return None
        return v.strip() or None


class RatingResponse(CamelModel):
    id: int
    session_id: int
    rater_id: int
    rated_id: int
    rating: int
    comment: Optional[str] = None
    created_at: Optional[datetime] = None


class ReviewDisplay(CamelModel):
    """Rating as shown on a profile page"""
    id: int
    session_id: int
    rater_id: int
    rater_name: Optional[str] = None
    rating: int
    comment: Optional[str] = None
    created_at: Optional[datetime] = None


class RatingSummary(CamelModel):
    user_id: int
    average_rating: Optional[float] = Field(None, description="Mean rating rounded to one decimal")
    total_ratings: int
    rating_distribution: Dict[int, int]
    reviews: List[ReviewDisplay] = []
