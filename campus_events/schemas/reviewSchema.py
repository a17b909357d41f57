from datetime import datetime
from typing import Optional

from pydantic import Field

from campus_events.constants.constants import MAX_RATING, MIN_RATING
from campus_events.schemas.base import FROZEN, CamelModel


class ReviewCreate(CamelModel):
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING)
    comment: Optional[str] = Field(None, max_length=2000)


class Review(ReviewCreate):
    model_config = FROZEN

    id: int
    event_id: int
    user_id: int
    created_at: datetime
