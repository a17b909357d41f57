"""API endpoints for event registrations (tickets)."""

from typing import List

from fastapi import APIRouter, Depends, status

from campus_events.core.errors import AuthorizationError
from campus_events.core.security import get_current_user
from campus_events.core.storage import MemStorage, get_storage
from campus_events.schemas.registrationSchema import Registration
from campus_events.schemas.userSchema import User
from campus_events.utils.check_coordinator_role import check_coordinator_role, require_coordinator

router = APIRouter(tags=["registrations"])


@router.post(
    "/events/{event_id}/register",
    response_model=Registration,
    status_code=status.HTTP_201_CREATED,
)
async def register_for_event(
    event_id: int,
    current_user: User = Depends(get_current_user),
    storage: MemStorage = Depends(get_storage)
):
    """Register the current user for an event and issue a ticket code."""
    return storage.create_registration(event_id, current_user.id)


@router.get("/events/{event_id}/registrations", response_model=List[Registration])
async def list_event_registrations(
    event_id: int,
    current_user: User = Depends(require_coordinator),
    storage: MemStorage = Depends(get_storage)
):
    """List registrations for an event (coordinator only)."""
    storage.get_event(event_id)
    return storage.get_event_registrations(event_id)


@router.get("/registrations/{registration_id}", response_model=Registration)
async def get_registration(
    registration_id: int,
    current_user: User = Depends(get_current_user),
    storage: MemStorage = Depends(get_storage)
):
    """Get a single registration. Visible to its owner and to coordinators."""
    registration = storage.get_registration(registration_id)
    if registration.user_id != current_user.id and not check_coordinator_role(current_user):
        raise AuthorizationError("You can only view your own registrations")
    return registration
