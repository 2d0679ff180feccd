"""Store interface (port) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill.
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from jotter.application.dtos.user import FindUser, UpdateUser, UserResult


class IUserStore(Protocol):
    """Protocol for user persistence used by UserService and maintenance commands."""

    async def list_users(self, find: FindUser) -> list[UserResult]:
        """Return users matching find; empty list when none match."""

    async def get_user(self, find: FindUser) -> UserResult | None:
        """Return the first user matching find, or None."""

    async def update_user(self, update: UpdateUser) -> UserResult | None:
        """Apply a partial update by id; None when the id is unknown."""

    async def close(self) -> None:
        """Release the underlying engine."""
