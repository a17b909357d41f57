"""Pytest configuration and shared fixtures."""

import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SEED_ON_STARTUP"] = "false"

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from campus_events.constants.constants import UserRole
from campus_events.core.storage import MemStorage
from campus_events.main import create_app
from campus_events.schemas.catalogSchema import CategoryCreate, VenueCreate
from campus_events.schemas.eventSchema import EventCreate
from campus_events.schemas.userSchema import UserCreate

PASSWORD = "correct-horse-battery"


@pytest.fixture
def storage() -> MemStorage:
    return MemStorage(strict_references=True)


@pytest.fixture
def catalog(storage: MemStorage) -> dict:
    """One venue, three categories, a coordinator and a student."""
    venue = storage.create_venue(VenueCreate(name="Auditorium", location="Main Campus", capacity=300))
    categories = [
        storage.create_category(CategoryCreate(name=name, slug=name.lower()))
        for name in ("Academic", "Cultural", "Sports")
    ]
    coordinator = storage.create_user(
        UserCreate(
            email="coord@campus.edu",
            name="Coordinator",
            role=UserRole.coordinator,
            password=PASSWORD,
            confirm_password=PASSWORD,
        ),
        password_hash="unused",
    )
    student = storage.create_user(
        UserCreate(
            email="student@campus.edu",
            name="Student",
            password=PASSWORD,
            confirm_password=PASSWORD,
        ),
        password_hash="unused",
    )
    return {
        "venue": venue,
        "categories": categories,
        "coordinator": coordinator,
        "student": student,
    }


@pytest.fixture
def make_event(storage: MemStorage, catalog: dict):
    """Factory creating events against the catalog fixture."""

    def _make_event(**overrides):
        fields = {
            "title": "Robotics Workshop",
            "description": "Build a line-following robot.",
            "start_date": datetime(2030, 5, 1, 9, 0, tzinfo=timezone.utc),
            "end_date": datetime(2030, 5, 1, 17, 0, tzinfo=timezone.utc),
            "venue_id": catalog["venue"].id,
            "category_id": catalog["categories"][2].id,
            "coordinator_id": catalog["coordinator"].id,
            "capacity": 40,
        }
        fields.update(overrides)
        return storage.create_event(EventCreate(**fields))

    return _make_event


@pytest.fixture
def app(storage: MemStorage):
    return create_app(storage=storage)


@pytest.fixture
def client(app) -> TestClient:
    """Anonymous client."""
    return TestClient(app)


def _register(client: TestClient, email: str, role: str) -> dict:
    response = client.post(
        "/api/register",
        json={
            "email": email,
            "name": email.split("@")[0],
            "role": role,
            "password": PASSWORD,
            "confirmPassword": PASSWORD,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def coordinator_client(app) -> TestClient:
    """Client holding a coordinator session."""
    client = TestClient(app)
    _register(client, "coordinator@campus.edu", "coordinator")
    return client


@pytest.fixture
def student_client(app) -> TestClient:
    """Client holding a student session."""
    client = TestClient(app)
    _register(client, "learner@campus.edu", "student")
    return client


@pytest.fixture
def event_payload(storage: MemStorage) -> dict:
    """JSON body for POST /api/events against a freshly added venue and category."""
    venue = storage.create_venue(VenueCreate(name="Hall B", location="North Campus", capacity=120))
    category = storage.create_category(CategoryCreate(name="Technical", slug="technical"))
    return {
        "title": "Hack Night",
        "description": "Overnight hackathon.",
        "startDate": "2030-03-10T18:00:00",
        "endDate": "2030-03-11T08:00:00",
        "venueId": venue.id,
        "categoryId": category.id,
        "capacity": 80,
    }
