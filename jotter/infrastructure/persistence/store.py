"""Store: data-access facade over the user repository.

Each call opens its own session; writes run in a transaction that commits
on success and rolls back on error. Driver errors surface as StoreException.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from jotter.application.dtos.user import FindUser, UpdateUser, UserResult
from jotter.core.config import Settings
from jotter.infrastructure.exceptions import StoreException
from jotter.infrastructure.persistence.database import create_session_factory
from jotter.infrastructure.persistence.repositories import UserRepository

logger = logging.getLogger(__name__)


class Store:
    """Query and persist user records for one engine.

    Built by bootstrap_store once migrations have run; close() disposes
    the engine.
    """

    def __init__(self, engine: AsyncEngine, settings: Settings) -> None:
        self.engine = engine
        self.settings = settings
        self._session_factory = create_session_factory(engine)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session inside a transaction (commit on success, rollback on error)."""
        async with self._session_factory() as session:
            async with session.begin():
                yield session

    async def list_users(self, find: FindUser) -> list[UserResult]:
        """Return users matching find; an empty list means none matched."""
        try:
            async with self.session() as session:
                return await UserRepository(session).list_users(find)
        except SQLAlchemyError as e:
            logger.error("Failed to list users: %s", e)
            raise StoreException("list_users", str(e)) from e

    async def get_user(self, find: FindUser) -> UserResult | None:
        """Return the first user matching find, or None."""
        users = await self.list_users(find)
        return users[0] if users else None

    async def create_user(
        self,
        username: str,
        password_hash: str,
        *,
        role: str,
        email: str = "",
        nickname: str = "",
    ) -> UserResult:
        try:
            async with self.session() as session:
                return await UserRepository(session).create_user(
                    username, password_hash, role=role, email=email, nickname=nickname
                )
        except SQLAlchemyError as e:
            logger.error("Failed to create user %s: %s", username, e)
            raise StoreException("create_user", str(e)) from e

    async def update_user(self, update: UpdateUser) -> UserResult | None:
        """Apply a partial update in a single transaction; None when the id is unknown."""
        try:
            async with self.session() as session:
                return await UserRepository(session).update_user(update)
        except SQLAlchemyError as e:
            logger.error("Failed to update user id=%s: %s", update.id, e)
            raise StoreException("update_user", str(e)) from e

    async def get_password_hash(self, user_id: int) -> str | None:
        try:
            async with self.session() as session:
                return await UserRepository(session).get_password_hash(user_id)
        except SQLAlchemyError as e:
            logger.error("Failed to read password hash for user id=%s: %s", user_id, e)
            raise StoreException("get_password_hash", str(e)) from e

    async def close(self) -> None:
        """Dispose the engine and its connection pool."""
        await self.engine.dispose()
        logger.debug("Store engine disposed")
