"""
Role definitions and the role hierarchy.
"""
import enum
from types import MappingProxyType
from typing import Mapping, Union


class Role(str, enum.Enum):
    """Organization role assigned to a user."""
    OWNER = "OWNER"
    ADMIN = "ADMIN"
    VIEWER = "VIEWER"

    @classmethod
    def _missing_(cls, value):
        # Upstream identity payloads store roles in lower case ("owner")
        if isinstance(value, str):
            return cls.__members__.get(value.upper())
        return None


# Higher numbers = more permissions
ROLE_HIERARCHY: Mapping[Role, int] = MappingProxyType({
    Role.VIEWER: 1,
    Role.ADMIN: 2,
    Role.OWNER: 3,
})


def rank(role: Union[Role, str]) -> int:
    """Return the hierarchy level of a role (accepts "owner" as well as Role.OWNER)."""
    return ROLE_HIERARCHY[Role(role)]


def has_role_or_higher(user, required_role: Union[Role, str]) -> bool:
    """
    Check if a user has a specific role or higher.

    Args:
        user: Anything with a ``role`` attribute (usually RbacUser)
        required_role: The minimum role required

    Returns:
        True if the user's role ranks at or above required_role
    """
    return rank(user.role) >= rank(required_role)
