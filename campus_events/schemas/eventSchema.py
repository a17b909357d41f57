from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator, model_validator

from campus_events.schemas.base import FROZEN, CamelModel, to_utc


# ==================== EVENT SCHEMAS ====================

class EventBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)

    start_date: datetime
    end_date: datetime

    image_url: Optional[str] = Field(None, max_length=500)

    venue_id: int = Field(..., gt=0)
    category_id: int = Field(..., gt=0)

    capacity: int = Field(..., gt=0)
    is_featured: bool = False

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_dates(cls, v: datetime) -> datetime:
        return to_utc(v)

    @model_validator(mode="after")
    def check_date_order(self):
        if self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class EventCreate(EventBase):
    # Defaults to the calling coordinator when omitted.
    coordinator_id: Optional[int] = Field(None, gt=0)


class EventUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)

    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    image_url: Optional[str] = Field(None, max_length=500)

    venue_id: Optional[int] = Field(None, gt=0)
    category_id: Optional[int] = Field(None, gt=0)
    coordinator_id: Optional[int] = Field(None, gt=0)

    capacity: Optional[int] = Field(None, gt=0)
    is_featured: Optional[bool] = None

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_dates(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_utc(v) if v is not None else v

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        nullable = {"image_url"}
        for name in self.model_fields_set:
            if name not in nullable and getattr(self, name) is None:
                raise ValueError(f"{type(self).model_fields[name].alias} cannot be null")
        return self

    def changes(self) -> dict:
        """Fields the caller actually sent, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class Event(EventBase):
    model_config = FROZEN

    id: int
    coordinator_id: int
