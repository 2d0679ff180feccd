"""User application service: masked partial updates of a user record."""

from __future__ import annotations

import asyncio
import re
from collections.abc import Callable

from jotter.application.dtos.user import FindUser, UpdateUser, UpdateUserRequest, UserResult
from jotter.application.interfaces import IUserStore
from jotter.application.services.password_policy import (
    PasswordLengthError,
    validate_password_length,
)
from jotter.core.constants import USER_NAME_PREFIX
from jotter.domain.enums import RowStatus, UserRole
from jotter.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)
from jotter.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

USERNAME_RE = re.compile(r"^[a-z0-9]([a-z0-9-]{0,30}[a-z0-9])?$")
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

UPDATABLE_PATHS = frozenset(
    {
        "username",
        "role",
        "email",
        "nickname",
        "password",
        "avatar_url",
        "description",
        "row_status",
    }
)

_MANAGER_ROLES = frozenset({UserRole.HOST.value, UserRole.ADMIN.value})


def parse_user_name(name: str) -> str:
    """Return the username from a resource name such as users/alice."""
    if not name.startswith(USER_NAME_PREFIX):
        raise ValidationException(f"invalid user name: {name!r}", field="name")
    username = name[len(USER_NAME_PREFIX) :]
    if not username or "/" in username:
        raise ValidationException(f"invalid user name: {name!r}", field="name")
    return username


class UserService:
    """Apply field-masked updates to users on behalf of an acting user.

    The acting user is an explicit argument of update_user; there is no
    ambient request context.
    """

    def __init__(self, store: IUserStore, hash_password: Callable[[str], str]) -> None:
        self._store = store
        self._hash_password = hash_password

    async def update_user(
        self, request: UpdateUserRequest, *, acting_as_username: str
    ) -> UserResult:
        """Update the paths in request.update_mask on the user named by request.name.

        Raises:
            ValidationException: malformed name, empty mask, unknown path, or invalid value.
            ResourceNotFoundException: acting user or target user does not exist.
            AuthorizationException: acting user is neither the target nor host/admin.
        """
        username = parse_user_name(request.name)
        if not request.update_mask:
            raise ValidationException("update mask is empty", field="update_mask")

        acting = await self._store.get_user(FindUser(username=acting_as_username))
        if acting is None:
            raise ResourceNotFoundException("user", acting_as_username)
        if acting.username != username and acting.role not in _MANAGER_ROLES:
            raise AuthorizationException(resource="user", action="update")

        user = await self._store.get_user(FindUser(username=username))
        if user is None:
            raise ResourceNotFoundException("user", username)

        update = await self._build_update(user.id, request)
        updated = await self._store.update_user(update)
        if updated is None:
            raise ResourceNotFoundException("user", username)
        logger.info(
            "User %s updated by %s (paths: %s)",
            username,
            acting_as_username,
            ", ".join(sorted(request.update_mask)),
        )
        return updated

    async def _build_update(self, user_id: int, request: UpdateUserRequest) -> UpdateUser:
        changes: dict[str, str] = {}
        for path in sorted(request.update_mask):
            if path not in UPDATABLE_PATHS:
                raise ValidationException(f"invalid update path: {path}", field="update_mask")
            if path == "password":
                password = request.password or ""
                try:
                    validate_password_length(password)
                except PasswordLengthError as e:
                    raise ValidationException(str(e), field="password") from e
                try:
                    changes["password_hash"] = await asyncio.to_thread(
                        self._hash_password, password
                    )
                except UnicodeEncodeError as e:
                    raise ValidationException(
                        "password is not valid UTF-8 text", field="password"
                    ) from e
            elif path == "username":
                new_username = (request.username or "").lower()
                if not USERNAME_RE.match(new_username):
                    raise ValidationException(
                        f"invalid username: {request.username!r}", field="username"
                    )
                changes["username"] = new_username
            elif path == "email":
                email = request.email or ""
                if email and not EMAIL_RE.match(email):
                    raise ValidationException(f"invalid email: {email!r}", field="email")
                changes["email"] = email
            elif path == "role":
                if request.role not in UserRole.values():
                    raise ValidationException(f"invalid role: {request.role!r}", field="role")
                changes["role"] = request.role
            elif path == "row_status":
                if request.row_status not in RowStatus.values():
                    raise ValidationException(
                        f"invalid row status: {request.row_status!r}", field="row_status"
                    )
                changes["row_status"] = request.row_status
            else:
                changes[path] = getattr(request, path) or ""
        return UpdateUser(id=user_id, **changes)
