"""Domain enumerations for users."""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class UserRole(_ValuesMixin, str, Enum):
    """User role. HOST is the instance owner; ADMIN and HOST may manage other users."""

    HOST = "host"
    ADMIN = "admin"
    USER = "user"


class RowStatus(_ValuesMixin, str, Enum):
    """Row lifecycle status for users."""

    NORMAL = "normal"
    ARCHIVED = "archived"
