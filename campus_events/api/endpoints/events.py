"""API endpoints for browsing and managing campus events."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from campus_events.core.storage import MemStorage, get_storage
from campus_events.schemas.eventSchema import Event, EventCreate, EventUpdate
from campus_events.schemas.userSchema import User
from campus_events.utils.check_coordinator_role import require_coordinator

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/events",
    tags=["events"]
)


@router.get("", response_model=List[Event])
async def list_events(
    category_id: Optional[int] = Query(None, alias="categoryId"),
    storage: MemStorage = Depends(get_storage)
):
    """Get all events, optionally filtered by category (public endpoint)"""
    return storage.get_events(category_id=category_id)


@router.get("/featured", response_model=List[Event])
async def list_featured_events(storage: MemStorage = Depends(get_storage)):
    """Get events flagged for prominent display (public endpoint)"""
    return storage.get_featured_events()


@router.get("/{event_id}", response_model=Event)
async def get_event(
    event_id: int,
    storage: MemStorage = Depends(get_storage)
):
    """Get event details (public endpoint)"""
    return storage.get_event(event_id)


@router.post("", response_model=Event, status_code=status.HTTP_201_CREATED)
async def create_event(
    payload: EventCreate,
    current_user: User = Depends(require_coordinator),
    storage: MemStorage = Depends(get_storage)
):
    """
    Create a new event (coordinator only).
    coordinatorId defaults to the calling coordinator.
    """
    if payload.coordinator_id is None:
        payload = payload.model_copy(update={"coordinator_id": current_user.id})

    event = storage.create_event(payload)
    logger.info(f"Coordinator {current_user.id} created event {event.id}")
    return event


@router.patch("/{event_id}", response_model=Event)
async def update_event(
    event_id: int,
    payload: EventUpdate,
    current_user: User = Depends(require_coordinator),
    storage: MemStorage = Depends(get_storage)
):
    """
    Update an event (coordinator only).
    Only provided fields are changed.
    """
    return storage.update_event(event_id, payload)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    event_id: int,
    current_user: User = Depends(require_coordinator),
    storage: MemStorage = Depends(get_storage)
):
    """Delete an event with its registrations and reviews (coordinator only)."""
    storage.delete_event(event_id)
    logger.info(f"Coordinator {current_user.id} deleted event {event_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
