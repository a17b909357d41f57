from uuid import uuid4

from campus_events.constants.constants import TICKET_CODE_LENGTH


def generate_ticket_code(length: int = TICKET_CODE_LENGTH) -> str:
    """Return a short uppercase alphanumeric ticket code, e.g. ``3F9A0C21BE``."""
    return uuid4().hex[:length].upper()
