"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime

from jotter.core.constants import USER_NAME_PREFIX


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of list_users, update_user, etc.). No password."""

    id: int
    username: str
    role: str
    email: str
    nickname: str
    avatar_url: str
    description: str
    row_status: str
    created_at: datetime
    updated_at: datetime

    @property
    def name(self) -> str:
        """Resource name, e.g. users/alice."""
        return f"{USER_NAME_PREFIX}{self.username}"


@dataclass(frozen=True)
class FindUser:
    """Store filter for users. Unset fields do not constrain the query."""

    id: int | None = None
    username: str | None = None
    email: str | None = None
    role: str | None = None


@dataclass(frozen=True)
class UpdateUser:
    """Store-level partial update keyed by id. Only non-None fields are written."""

    id: int
    username: str | None = None
    role: str | None = None
    email: str | None = None
    nickname: str | None = None
    password_hash: str | None = None
    avatar_url: str | None = None
    description: str | None = None
    row_status: str | None = None

    def changes(self) -> dict[str, str]:
        """Return the column values this update sets."""
        fields = (
            "username",
            "role",
            "email",
            "nickname",
            "password_hash",
            "avatar_url",
            "description",
            "row_status",
        )
        return {f: getattr(self, f) for f in fields if getattr(self, f) is not None}


@dataclass(frozen=True)
class UpdateUserRequest:
    """Service-level update: target resource name, new values, and the paths to apply.

    Only paths listed in update_mask are read from the request; other
    values are ignored even when set.
    """

    name: str
    update_mask: frozenset[str] = field(default_factory=frozenset)
    username: str | None = None
    role: str | None = None
    email: str | None = None
    nickname: str | None = None
    password: str | None = None
    avatar_url: str | None = None
    description: str | None = None
    row_status: str | None = None
