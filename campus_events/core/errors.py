"""Domain errors raised by the storage and session layers.

Every error carries an ``ErrorCode``, a user-safe message and the HTTP status
the API layer answers with. None of them are recovered locally.
"""

from typing import Dict, List, Optional

from campus_events.constants.constants import ErrorCode


class CampusEventsError(Exception):
    """Base error with code, message and HTTP status."""

    code: ErrorCode = ErrorCode.VALIDATION_FAILED
    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> Dict:
        return {"message": self.message, "code": self.code.value}


class ValidationError(CampusEventsError):
    """Raised when input fields are missing or malformed."""

    code = ErrorCode.VALIDATION_FAILED
    status_code = 400

    def __init__(
        self,
        message: str = "Invalid input",
        errors: Optional[List[Dict[str, str]]] = None,
    ) -> None:
        super().__init__(message)
        self.errors = errors or []

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls(message=message, errors=[{"field": field, "message": message}])

    def to_dict(self) -> Dict:
        payload = super().to_dict()
        payload["errors"] = self.errors
        return payload


class AuthenticationError(CampusEventsError):
    """Raised when the request carries no valid session."""

    code = ErrorCode.NOT_AUTHENTICATED
    status_code = 401

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message)


class AuthorizationError(CampusEventsError):
    """Raised when the session user lacks the required role."""

    code = ErrorCode.FORBIDDEN
    status_code = 403

    def __init__(self, message: str = "You do not have permission to perform this action") -> None:
        super().__init__(message)


class NotFoundError(CampusEventsError):
    """Raised when a referenced entity id does not exist."""

    code = ErrorCode.NOT_FOUND
    status_code = 404

    def __init__(self, entity: str, entity_id) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(CampusEventsError):
    """Raised when a unique field (email, slug) is already taken."""

    code = ErrorCode.CONFLICT
    status_code = 409


def field_errors(errors) -> List[Dict[str, str]]:
    """Flatten pydantic error dicts into ``[{"field", "message"}]``."""
    flattened = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        flattened.append({
            "field": ".".join(loc) or "body",
            "message": error.get("msg", "Invalid value"),
        })
    return flattened
