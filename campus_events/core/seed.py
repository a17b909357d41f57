"""Sample data loaded into an empty store on startup."""

import logging
from datetime import datetime, timezone

from campus_events.constants.constants import SAMPLE_CATEGORIES, SAMPLE_VENUES, UserRole
from campus_events.core.security import hash_password
from campus_events.core.storage import MemStorage
from campus_events.schemas.catalogSchema import CategoryCreate, VenueCreate
from campus_events.schemas.eventSchema import EventCreate
from campus_events.schemas.userSchema import UserCreate

logger = logging.getLogger(__name__)


def seed_sample_data(storage: MemStorage, coordinator_email: str, coordinator_password: str) -> None:
    """Populate the store with demo venues, categories, a coordinator and a featured event."""
    venues = [storage.create_venue(VenueCreate(**v)) for v in SAMPLE_VENUES]
    categories = {c["slug"]: storage.create_category(CategoryCreate(**c)) for c in SAMPLE_CATEGORIES}

    coordinator = storage.create_user(
        UserCreate(
            email=coordinator_email,
            name="Campus Coordinator",
            role=UserRole.coordinator,
            password=coordinator_password,
            confirm_password=coordinator_password,
        ),
        password_hash=hash_password(coordinator_password),
    )

    storage.create_event(
        EventCreate(
            title="Annual Tech Fest",
            description="Join us for the biggest tech event of the year!",
            start_date=datetime(2024, 4, 15, 10, 0, tzinfo=timezone.utc),
            end_date=datetime(2024, 4, 17, 18, 0, tzinfo=timezone.utc),
            image_url="https://images.unsplash.com/photo-1513151233558-d860c5398176",
            venue_id=venues[0].id,
            category_id=categories["technical"].id,
            coordinator_id=coordinator.id,
            capacity=500,
            is_featured=True,
        )
    )
    logger.info(f"Seeded {len(venues)} venues, {len(categories)} categories and 1 event")
