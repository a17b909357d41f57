"""Tests for startup seeding.

Run with: pytest tests/test_seed.py -v
"""

from fastapi.testclient import TestClient

from campus_events.core import seed
from campus_events.core.config import settings
from campus_events.core.security import verify_password
from campus_events.core.storage import MemStorage
from campus_events.main import create_app


class TestSeedSampleData:
    """Tests for seed_sample_data"""

    def test_seeds_catalog_coordinator_and_featured_event(self):
        storage = MemStorage()
        seed.seed_sample_data(storage, "seed@campus.edu", "seed-password-1")

        assert [v.name for v in storage.get_venues()] == ["University Auditorium", "Sports Complex"]
        assert [c.slug for c in storage.get_categories()] == ["academic", "cultural", "sports", "technical"]

        coordinator = storage.get_user_by_email("seed@campus.edu")
        assert coordinator.role.value == "coordinator"
        assert verify_password("seed-password-1", coordinator.password_hash)

        (event,) = storage.get_featured_events()
        assert event.category_id == 4
        assert event.coordinator_id == coordinator.id

    def test_lifespan_seeds_empty_store(self, monkeypatch):
        monkeypatch.setattr(settings, "SEED_ON_STARTUP", True)
        monkeypatch.setattr(settings, "SEED_COORDINATOR_PASSWORD", "seed-password-1")
        storage = MemStorage()

        with TestClient(create_app(storage=storage)) as client:
            assert len(client.get("/api/events").json()) == 1

    def test_lifespan_skips_seeding_when_disabled(self):
        storage = MemStorage()
        with TestClient(create_app(storage=storage)) as client:
            assert client.get("/api/events").json() == []
