"""Security utilities for hashing passwords and resolving the session user."""

import logging
from typing import Callable, Optional

import bcrypt
from fastapi import Depends, Request

from campus_events.constants.constants import UserRole
from campus_events.core.errors import AuthenticationError, AuthorizationError, NotFoundError
from campus_events.core.storage import MemStorage, get_storage
from campus_events.schemas.userSchema import User

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "user_id"


def hash_password(password: str) -> str:
    """Hash password using bcrypt. UserCreate rejects passwords longer than 72 UTF-8 bytes."""
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is malformed")
        return False


def authenticate_user(storage: MemStorage, email: str, password: str) -> User:
    """
    Resolve login credentials to a stored user.

    Raises:
        AuthenticationError: If the email is unknown or the password does not match.
    """
    user = storage.get_user_by_email(email)
    if user is None or not verify_password(password, user.password_hash):
        logger.warning(f"Failed login attempt for {email}")
        raise AuthenticationError("Invalid email or password")
    return user


def start_session(request: Request, user: User) -> None:
    request.session.clear()
    request.session[SESSION_USER_KEY] = user.id


def end_session(request: Request) -> None:
    request.session.clear()


async def get_optional_user(
    request: Request,
    storage: MemStorage = Depends(get_storage)
) -> Optional[User]:
    """Return the session user, or None when no valid session is present."""
    user_id = request.session.get(SESSION_USER_KEY)
    if user_id is None:
        return None

    try:
        return storage.get_user(user_id)
    except NotFoundError:
        # Session outlived the in-memory store (e.g. after a restart).
        request.session.clear()
        return None


async def get_current_user(
    current_user: Optional[User] = Depends(get_optional_user)
) -> User:
    """
    Dependency to get the current authenticated user from the session cookie
    Raises 401 if not authenticated
    """
    if current_user is None:
        raise AuthenticationError()
    return current_user


def require_roles(*roles: UserRole) -> Callable:
    """
    Build a dependency that admits only users holding one of ``roles``.

    No session answers 401, a session with another role answers 403.

    Example:
        >>> @router.post("/", dependencies=[Depends(require_roles(UserRole.coordinator))])
    """
    allowed = set(roles)

    async def dependency(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in allowed:
            logger.warning(
                f"User {current_user.id} ({current_user.role.value}) denied; "
                f"requires {sorted(r.value for r in allowed)}"
            )
            raise AuthorizationError()
        return current_user

    return dependency
