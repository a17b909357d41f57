from typing import Optional

from pydantic import Field

from campus_events.schemas.base import FROZEN, CamelModel


# ==================== VENUE SCHEMAS ====================

class VenueCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    location: str = Field(..., min_length=1, max_length=255)
    image_url: Optional[str] = Field(None, max_length=500)
    capacity: int = Field(..., gt=0)


class Venue(VenueCreate):
    model_config = FROZEN

    id: int


# ==================== CATEGORY SCHEMAS ====================

class CategoryCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    slug: str = Field(..., min_length=1, max_length=100, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class Category(CategoryCreate):
    model_config = FROZEN

    id: int
