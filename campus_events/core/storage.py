"""
In-memory repository for the Campus Events API
- One collection per entity, keyed by auto-incrementing integer ids
- Unique email, category slug and ticket code
- Event deletion cascades to registrations and reviews
- Optional strict foreign-key checks on events
"""
import logging
import threading
from typing import Callable, Dict, List, Mapping, Optional, Union

from fastapi import Request
from pydantic import ValidationError as PydanticValidationError

from campus_events.constants.constants import (
    MAX_TICKET_CODE_ATTEMPTS,
    UserRole,
)
from campus_events.core.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    field_errors,
)
from campus_events.schemas.base import utcnow
from campus_events.schemas.catalogSchema import Category, CategoryCreate, Venue, VenueCreate
from campus_events.schemas.eventSchema import Event, EventCreate, EventUpdate
from campus_events.schemas.registrationSchema import Registration
from campus_events.schemas.reviewSchema import Review, ReviewCreate
from campus_events.schemas.userSchema import User, UserCreate, normalize_email
from campus_events.utils.ticket_codes import generate_ticket_code

logger = logging.getLogger(__name__)

COLLECTIONS = ("users", "events", "venues", "categories", "registrations", "reviews")


class MemStorage:
    """Process-lifetime store for users, catalog, events, registrations and reviews."""

    def __init__(
        self,
        strict_references: bool = True,
        ticket_code_factory: Callable[[], str] = generate_ticket_code,
    ):
        self.strict_references = strict_references
        self._ticket_code_factory = ticket_code_factory
        self._lock = threading.RLock()

        self._users: Dict[int, User] = {}
        self._events: Dict[int, Event] = {}
        self._venues: Dict[int, Venue] = {}
        self._categories: Dict[int, Category] = {}
        self._registrations: Dict[int, Registration] = {}
        self._reviews: Dict[int, Review] = {}
        self._ticket_codes: set = set()
        self._next_ids: Dict[str, int] = {name: 1 for name in COLLECTIONS}

    def _next_id(self, collection: str) -> int:
        next_id = self._next_ids[collection]
        self._next_ids[collection] = next_id + 1
        return next_id

    def is_empty(self) -> bool:
        with self._lock:
            return not (self._users or self._events or self._venues or self._categories)

    # ------------------------------
    # Users
    # ------------------------------
    def create_user(self, data: UserCreate, password_hash: str) -> User:
        with self._lock:
            if self._find_user_by_email(data.email) is not None:
                raise ConflictError("Email is already registered")

            user = User(
                id=self._next_id("users"),
                email=data.email,
                name=data.name,
                role=data.role,
                password_hash=password_hash,
            )
            self._users[user.id] = user
            logger.info(f"Created user {user.id} ({user.role.value})")
            return user

    def get_user(self, user_id: int) -> User:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise NotFoundError("User", user_id)
            return user

    def get_user_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            return self._find_user_by_email(email)

    def _find_user_by_email(self, email: str) -> Optional[User]:
        email = normalize_email(email)
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    # ------------------------------
    # Venues & Categories
    # ------------------------------
    def create_venue(self, data: VenueCreate) -> Venue:
        with self._lock:
            venue = Venue(id=self._next_id("venues"), **data.model_dump())
            self._venues[venue.id] = venue
            logger.info(f"Created venue {venue.id}: {venue.name}")
            return venue

    def get_venues(self) -> List[Venue]:
        with self._lock:
            return list(self._venues.values())

    def get_venue(self, venue_id: int) -> Venue:
        with self._lock:
            venue = self._venues.get(venue_id)
            if venue is None:
                raise NotFoundError("Venue", venue_id)
            return venue

    def create_category(self, data: CategoryCreate) -> Category:
        with self._lock:
            if any(c.slug == data.slug for c in self._categories.values()):
                raise ConflictError(f"Category slug '{data.slug}' already exists")

            category = Category(id=self._next_id("categories"), **data.model_dump())
            self._categories[category.id] = category
            logger.info(f"Created category {category.id}: {category.slug}")
            return category

    def get_categories(self) -> List[Category]:
        with self._lock:
            return list(self._categories.values())

    def get_category(self, category_id: int) -> Category:
        with self._lock:
            category = self._categories.get(category_id)
            if category is None:
                raise NotFoundError("Category", category_id)
            return category

    # ------------------------------
    # Events
    # ------------------------------
    def get_events(self, category_id: Optional[int] = None) -> List[Event]:
        if category_id is not None:
            return self.get_events_by_category(category_id)
        with self._lock:
            return list(self._events.values())

    def get_events_by_category(self, category_id: int) -> List[Event]:
        with self._lock:
            return [e for e in self._events.values() if e.category_id == category_id]

    def get_featured_events(self) -> List[Event]:
        with self._lock:
            return [e for e in self._events.values() if e.is_featured]

    def get_event(self, event_id: int) -> Event:
        with self._lock:
            event = self._events.get(event_id)
            if event is None:
                raise NotFoundError("Event", event_id)
            return event

    def create_event(self, data: EventCreate) -> Event:
        with self._lock:
            if data.coordinator_id is None:
                raise ValidationError.for_field("coordinatorId", "coordinatorId is required")

            fields = data.model_dump()
            self._check_event_references(fields)

            event = Event(id=self._next_id("events"), **fields)
            self._events[event.id] = event
            logger.info(f"Created event {event.id}: {event.title}")
            return event

    def update_event(self, event_id: int, partial: Union[EventUpdate, Mapping]) -> Event:
        with self._lock:
            current = self._events.get(event_id)
            if current is None:
                raise NotFoundError("Event", event_id)

            if not isinstance(partial, EventUpdate):
                try:
                    partial = EventUpdate.model_validate(dict(partial))
                except PydanticValidationError as e:
                    raise ValidationError("Invalid event data", field_errors(e.errors()))

            changes = partial.changes()
            self._check_event_references(changes)

            try:
                updated = Event.model_validate({**current.model_dump(), **changes})
            except PydanticValidationError as e:
                raise ValidationError("Invalid event data", field_errors(e.errors()))

            self._events[event_id] = updated
            logger.info(f"Updated event {event_id}: {sorted(changes)}")
            return updated

    def delete_event(self, event_id: int) -> None:
        with self._lock:
            if event_id not in self._events:
                raise NotFoundError("Event", event_id)

            del self._events[event_id]

            registration_ids = [r.id for r in self._registrations.values() if r.event_id == event_id]
            for registration_id in registration_ids:
                del self._registrations[registration_id]

            review_ids = [r.id for r in self._reviews.values() if r.event_id == event_id]
            for review_id in review_ids:
                del self._reviews[review_id]

            logger.info(
                f"Deleted event {event_id} with {len(registration_ids)} registrations "
                f"and {len(review_ids)} reviews"
            )

    def _check_event_references(self, fields: Mapping) -> None:
        """Raise ValidationError for unknown venue, category or coordinator ids."""
        if not self.strict_references:
            return

        errors = []
        venue_id = fields.get("venue_id")
        if venue_id is not None and venue_id not in self._venues:
            errors.append({"field": "venueId", "message": f"Venue {venue_id} does not exist"})

        category_id = fields.get("category_id")
        if category_id is not None and category_id not in self._categories:
            errors.append({"field": "categoryId", "message": f"Category {category_id} does not exist"})

        coordinator_id = fields.get("coordinator_id")
        if coordinator_id is not None:
            coordinator = self._users.get(coordinator_id)
            if coordinator is None:
                errors.append({"field": "coordinatorId", "message": f"User {coordinator_id} does not exist"})
            elif coordinator.role != UserRole.coordinator:
                errors.append({"field": "coordinatorId", "message": f"User {coordinator_id} is not a coordinator"})

        if errors:
            raise ValidationError("Event references unknown records", errors)

    # ------------------------------
    # Registrations
    # ------------------------------
    def create_registration(self, event_id: int, user_id: int) -> Registration:
        with self._lock:
            if self.strict_references:
                if event_id not in self._events:
                    raise NotFoundError("Event", event_id)
                if user_id not in self._users:
                    raise NotFoundError("User", user_id)

            registration = Registration(
                id=self._next_id("registrations"),
                event_id=event_id,
                user_id=user_id,
                ticket_code=self._issue_ticket_code(),
                registered_at=utcnow(),
            )
            self._registrations[registration.id] = registration
            logger.info(f"Registered user {user_id} for event {event_id} ({registration.ticket_code})")
            return registration

    def _issue_ticket_code(self) -> str:
        for _ in range(MAX_TICKET_CODE_ATTEMPTS):
            code = self._ticket_code_factory()
            if code not in self._ticket_codes:
                self._ticket_codes.add(code)
                return code
            logger.warning(f"Ticket code collision on {code}, retrying")
        raise RuntimeError("Could not generate a unique ticket code")

    def get_registration(self, registration_id: int) -> Registration:
        with self._lock:
            registration = self._registrations.get(registration_id)
            if registration is None:
                raise NotFoundError("Registration", registration_id)
            return registration

    def get_event_registrations(self, event_id: int) -> List[Registration]:
        with self._lock:
            return [r for r in self._registrations.values() if r.event_id == event_id]

    # ------------------------------
    # Reviews
    # ------------------------------
    def create_review(self, event_id: int, user_id: int, data: ReviewCreate) -> Review:
        with self._lock:
            if self.strict_references and event_id not in self._events:
                raise NotFoundError("Event", event_id)

            review = Review(
                id=self._next_id("reviews"),
                event_id=event_id,
                user_id=user_id,
                rating=data.rating,
                comment=data.comment,
                created_at=utcnow(),
            )
            self._reviews[review.id] = review
            logger.info(f"User {user_id} reviewed event {event_id} ({review.rating}/5)")
            return review

    def get_event_reviews(self, event_id: int) -> List[Review]:
        with self._lock:
            return [r for r in self._reviews.values() if r.event_id == event_id]


def get_storage(request: Request) -> MemStorage:
    """
    FastAPI dependency for the repository
    Usage:
    @router.get("/")
    async def endpoint(storage: MemStorage = Depends(get_storage)):
        ...
    """
    return request.app.state.storage
