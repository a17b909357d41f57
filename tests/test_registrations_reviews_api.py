"""Integration tests for registrations, reviews and the venue/category catalog.

Run with: pytest tests/test_registrations_reviews_api.py -v
"""

from fastapi.testclient import TestClient

from campus_events.core.storage import MemStorage
from campus_events.main import create_app


class TestRegisterForEvent:
    """Tests for POST /api/events/{id}/register"""

    def test_requires_session(self, client: TestClient, make_event):
        event = make_event()
        assert client.post(f"/api/events/{event.id}/register").status_code == 401

    def test_issues_unique_tickets(self, student_client: TestClient, make_event):
        """Registering twice for the same event yields two distinct tickets."""
        event = make_event()
        first = student_client.post(f"/api/events/{event.id}/register")
        second = student_client.post(f"/api/events/{event.id}/register")

        assert first.status_code == second.status_code == 201
        assert first.json()["eventId"] == event.id
        assert first.json()["ticketCode"] != second.json()["ticketCode"]
        assert "registeredAt" in first.json()

    def test_unknown_event_in_strict_mode(self, student_client: TestClient):
        assert student_client.post("/api/events/999/register").status_code == 404

    def test_unknown_event_in_permissive_mode(self):
        client = TestClient(create_app(storage=MemStorage(strict_references=False)))
        client.post(
            "/api/register",
            json={
                "email": "p@campus.edu",
                "name": "P",
                "password": "long-enough-1",
                "confirmPassword": "long-enough-1",
            },
        )
        response = client.post("/api/events/999/register")
        assert response.status_code == 201
        assert response.json()["eventId"] == 999


class TestViewRegistrations:
    """Tests for GET /api/registrations/{id} and GET /api/events/{id}/registrations"""

    def test_owner_can_view_own_registration(self, student_client: TestClient, make_event):
        event = make_event()
        registration = student_client.post(f"/api/events/{event.id}/register").json()

        response = student_client.get(f"/api/registrations/{registration['id']}")
        assert response.status_code == 200
        assert response.json() == registration

    def test_other_student_cannot_view(self, student_client: TestClient, make_event, storage, catalog):
        event = make_event()
        other = storage.create_registration(event.id, catalog["student"].id)

        response = student_client.get(f"/api/registrations/{other.id}")
        assert response.status_code == 403

    def test_coordinator_lists_event_registrations(
        self, coordinator_client: TestClient, student_client: TestClient, make_event
    ):
        event = make_event()
        student_client.post(f"/api/events/{event.id}/register")
        student_client.post(f"/api/events/{event.id}/register")

        response = coordinator_client.get(f"/api/events/{event.id}/registrations")
        assert response.status_code == 200
        assert len(response.json()) == 2

    def test_student_cannot_list_event_registrations(self, student_client: TestClient, make_event):
        event = make_event()
        assert student_client.get(f"/api/events/{event.id}/registrations").status_code == 403

    def test_listing_registrations_of_missing_event(self, coordinator_client: TestClient):
        assert coordinator_client.get("/api/events/999/registrations").status_code == 404


class TestReviews:
    """Tests for GET/POST /api/events/{id}/reviews"""

    def test_post_review(self, student_client: TestClient, make_event):
        event = make_event()
        me = student_client.get("/api/user").json()

        response = student_client.post(f"/api/events/{event.id}/reviews", json={"rating": 4, "comment": "Fun"})
        assert response.status_code == 201
        body = response.json()
        assert body["userId"] == me["id"]
        assert body["eventId"] == event.id
        assert "createdAt" in body

        reviews = student_client.get(f"/api/events/{event.id}/reviews").json()
        assert [r["id"] for r in reviews] == [body["id"]]

    def test_review_requires_session(self, client: TestClient, make_event):
        event = make_event()
        response = client.post(f"/api/events/{event.id}/reviews", json={"rating": 4})
        assert response.status_code == 401

    def test_review_rating_out_of_range(self, student_client: TestClient, make_event):
        event = make_event()
        response = student_client.post(f"/api/events/{event.id}/reviews", json={"rating": 9})
        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "rating"

    def test_reviews_of_unknown_event_are_empty(self, client: TestClient):
        assert client.get("/api/events/999/reviews").json() == []


class TestCatalog:
    """Tests for /api/venues and /api/categories"""

    def test_list_venues_and_categories(self, client: TestClient, catalog):
        venues = client.get("/api/venues").json()
        categories = client.get("/api/categories").json()

        assert [v["name"] for v in venues] == ["Auditorium"]
        assert [c["slug"] for c in categories] == ["academic", "cultural", "sports"]

    def test_get_venue(self, client: TestClient, catalog):
        venue = catalog["venue"]
        assert client.get(f"/api/venues/{venue.id}").json()["capacity"] == venue.capacity
        assert client.get("/api/venues/999").status_code == 404

    def test_coordinator_creates_category(self, coordinator_client: TestClient):
        response = coordinator_client.post("/api/categories", json={"name": "Music", "slug": "music"})
        assert response.status_code == 201

        duplicate = coordinator_client.post("/api/categories", json={"name": "Music 2", "slug": "music"})
        assert duplicate.status_code == 409

    def test_category_slug_format(self, coordinator_client: TestClient):
        response = coordinator_client.post("/api/categories", json={"name": "Bad", "slug": "Not A Slug"})
        assert response.status_code == 400

    def test_student_cannot_create_venue(self, student_client: TestClient):
        response = student_client.post(
            "/api/venues", json={"name": "Gym", "location": "East", "capacity": 50}
        )
        assert response.status_code == 403
