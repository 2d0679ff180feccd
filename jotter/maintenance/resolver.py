"""Resolve the target of a maintenance command to a canonical username.

Exactly one selector is used, by fixed precedence: id, then username,
then email. Only id and email are looked up; a username is taken as given
and its existence is left to the update step.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from jotter.application.dtos.user import FindUser
from jotter.application.interfaces import IUserStore
from jotter.maintenance.exceptions import MissingIdentifierException, UserNotFoundException
from jotter.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

UNSET_ID = -1


class UserSelector(str, Enum):
    """Which identifier picked the target user."""

    ID = "id"
    USERNAME = "username"
    EMAIL = "email"


@dataclass(frozen=True)
class UserIdentity:
    """The one identifier that drives resolution."""

    selector: UserSelector
    value: Any

    def describe(self) -> str:
        """Operator-facing description, e.g. 'user with id 5'."""
        if self.selector is UserSelector.ID:
            return f"user with id {self.value}"
        if self.selector is UserSelector.EMAIL:
            return f"user with email address {self.value}"
        return f"username {self.value}"


def select_identity(
    user_id: int = UNSET_ID,
    username: str | None = None,
    email: str | None = None,
) -> UserIdentity:
    """Pick the identifier to resolve by: id > username > email.

    username and email are trimmed; blank values count as unset.

    Raises:
        MissingIdentifierException: no identifier was set.
    """
    username = (username or "").strip()
    email = (email or "").strip()
    if user_id != UNSET_ID:
        return UserIdentity(UserSelector.ID, user_id)
    if username:
        return UserIdentity(UserSelector.USERNAME, username)
    if email:
        return UserIdentity(UserSelector.EMAIL, email)
    raise MissingIdentifierException()


async def resolve_username(identity: UserIdentity, store: IUserStore) -> str:
    """Return the canonical username for identity.

    Raises:
        UserNotFoundException: id or email lookup matched no user.
    """
    if identity.selector is UserSelector.USERNAME:
        return identity.value
    if identity.selector is UserSelector.ID:
        find = FindUser(id=identity.value)
    else:
        find = FindUser(email=identity.value)
    users = await store.list_users(find)
    if not users:
        raise UserNotFoundException(identity.selector.value, identity.value)
    logger.debug("Resolved %s to %s", identity.describe(), users[0].username)
    return users[0].username
