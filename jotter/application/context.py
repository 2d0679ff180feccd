"""Service context: the application service layer wired to one Store.

A ServiceContext is what the server builds before it starts listening.
Maintenance commands build one too, with the port-shifted settings, and
never start it; shutdown() releases the store.
"""

from __future__ import annotations

from types import TracebackType

from jotter.application.services.user_service import UserService
from jotter.core.config import Settings
from jotter.infrastructure.persistence.store import Store
from jotter.infrastructure.security.password import get_password_hash
from jotter.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class ServiceContext:
    """Settings, store and services for one process."""

    def __init__(self, settings: Settings, store: Store) -> None:
        self.settings = settings
        self.store = store
        self.users = UserService(store, hash_password=get_password_hash)
        self._closed = False

    async def shutdown(self) -> None:
        """Release the store. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        await self.store.close()
        logger.debug("Service context on port %s shut down", self.settings.port)

    async def __aenter__(self) -> ServiceContext:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.shutdown()
