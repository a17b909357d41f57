"""API endpoints for venues and categories."""

from typing import List

from fastapi import APIRouter, Depends, status

from campus_events.core.storage import MemStorage, get_storage
from campus_events.schemas.catalogSchema import Category, CategoryCreate, Venue, VenueCreate
from campus_events.utils.check_coordinator_role import require_coordinator

router = APIRouter(tags=["catalog"])


@router.get("/venues", response_model=List[Venue])
async def list_venues(storage: MemStorage = Depends(get_storage)):
    """Get all venues (public endpoint)"""
    return storage.get_venues()


@router.get("/venues/{venue_id}", response_model=Venue)
async def get_venue(
    venue_id: int,
    storage: MemStorage = Depends(get_storage)
):
    return storage.get_venue(venue_id)


@router.post(
    "/venues",
    response_model=Venue,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_coordinator)],
)
async def create_venue(
    payload: VenueCreate,
    storage: MemStorage = Depends(get_storage)
):
    """Add a venue (coordinator only)."""
    return storage.create_venue(payload)


@router.get("/categories", response_model=List[Category])
async def list_categories(storage: MemStorage = Depends(get_storage)):
    """Get all categories (public endpoint)"""
    return storage.get_categories()


@router.post(
    "/categories",
    response_model=Category,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_coordinator)],
)
async def create_category(
    payload: CategoryCreate,
    storage: MemStorage = Depends(get_storage)
):
    """Add a category (coordinator only). Slugs are unique."""
    return storage.create_category(payload)
