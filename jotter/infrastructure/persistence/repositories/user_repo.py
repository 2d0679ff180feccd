"""User repository. Interface methods return application DTOs."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jotter.application.dtos.user import FindUser, UpdateUser, UserResult
from jotter.infrastructure.persistence.models.user import User
from jotter.infrastructure.persistence.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult (no password)."""
    return UserResult(
        id=u.id,
        username=u.username,
        role=u.role,
        email=u.email,
        nickname=u.nickname,
        avatar_url=u.avatar_url,
        description=u.description,
        row_status=u.row_status,
        created_at=u.created_at,
        updated_at=u.updated_at,
    )


class UserRepository(BaseRepository[User]):
    """User repository. list_users, create_user, update_user."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def list_users(self, find: FindUser) -> list[UserResult]:
        """Return users matching every set field of find, ordered by id."""
        stmt = select(User)
        if find.id is not None:
            stmt = stmt.where(User.id == find.id)
        if find.username is not None:
            stmt = stmt.where(User.username == find.username)
        if find.email is not None:
            stmt = stmt.where(User.email == find.email)
        if find.role is not None:
            stmt = stmt.where(User.role == find.role)
        result = await self.db.execute(stmt.order_by(User.id))
        return [_user_to_result(u) for u in result.scalars().all()]

    async def create_user(
        self,
        username: str,
        password_hash: str,
        *,
        role: str,
        email: str = "",
        nickname: str = "",
    ) -> UserResult:
        user = User(
            username=username,
            password_hash=password_hash,
            role=role,
            email=email,
            nickname=nickname,
        )
        created = await self.create(user)
        return _user_to_result(created)

    async def update_user(self, update: UpdateUser) -> UserResult | None:
        """Apply update.changes() to the user with update.id; None when no such user."""
        user = await self.get_by_id(update.id)
        if not user:
            return None
        for column, value in update.changes().items():
            setattr(user, column, value)
        updated = await self.update(user)
        return _user_to_result(updated)

    async def get_password_hash(self, user_id: int) -> str | None:
        """Return the stored hash for user_id (never exposed through UserResult)."""
        result = await self.db.execute(
            select(User.password_hash).where(User.id == user_id)
        )
        return result.scalar_one_or_none()

    async def _on_after_update(self, obj: User) -> None:
        logger.debug("Updated user %s (id=%s)", obj.username, obj.id)
