from campus_events.constants.constants import UserRole
from campus_events.core.security import require_roles
from campus_events.schemas.userSchema import User


def check_coordinator_role(user: User) -> bool:
    """Check if user may manage events."""
    return user.role == UserRole.coordinator


require_coordinator = require_roles(UserRole.coordinator)
