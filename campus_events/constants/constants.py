"""Constants for user roles, ticket codes and seed data."""

from enum import Enum


class UserRole(str, Enum):
    """Enumeration of user roles on the campus platform."""

    student = "student"
    coordinator = "coordinator"


class ErrorCode(str, Enum):
    """Machine-readable codes returned in error responses."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"


TICKET_CODE_LENGTH = 10
MAX_TICKET_CODE_ATTEMPTS = 20

MIN_RATING = 1
MAX_RATING = 5

# bcrypt only hashes the first 72 bytes and refuses longer input
MAX_PASSWORD_BYTES = 72


SAMPLE_VENUES = [
    {
        "name": "University Auditorium",
        "location": "Main Campus",
        "image_url": "https://images.unsplash.com/photo-1737107917737-27f5530650db",
        "capacity": 500,
    },
    {
        "name": "Sports Complex",
        "location": "North Campus",
        "image_url": "https://images.unsplash.com/photo-1737107917840-ea155fb60498",
        "capacity": 1000,
    },
]

SAMPLE_CATEGORIES = [
    {"name": "Academic", "slug": "academic"},
    {"name": "Cultural", "slug": "cultural"},
    {"name": "Sports", "slug": "sports"},
    {"name": "Technical", "slug": "technical"},
]
