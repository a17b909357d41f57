"""API endpoints for event reviews."""

from typing import List

from fastapi import APIRouter, Depends, status

from campus_events.core.security import get_current_user
from campus_events.core.storage import MemStorage, get_storage
from campus_events.schemas.reviewSchema import Review, ReviewCreate
from campus_events.schemas.userSchema import User

router = APIRouter(
    prefix="/events/{event_id}/reviews",
    tags=["reviews"]
)


@router.get("", response_model=List[Review])
async def list_event_reviews(
    event_id: int,
    storage: MemStorage = Depends(get_storage)
):
    """Get reviews for an event (public endpoint)"""
    return storage.get_event_reviews(event_id)


@router.post("", response_model=Review, status_code=status.HTTP_201_CREATED)
async def create_review(
    event_id: int,
    payload: ReviewCreate,
    current_user: User = Depends(get_current_user),
    storage: MemStorage = Depends(get_storage)
):
    """Leave a review for an event as the current user."""
    return storage.create_review(event_id, current_user.id, payload)
