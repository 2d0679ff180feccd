"""select_identity precedence and resolve_username lookups with a mocked store."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from jotter.application.dtos.user import FindUser, UserResult
from jotter.maintenance.exceptions import MissingIdentifierException, UserNotFoundException
from jotter.maintenance.resolver import (
    UserIdentity,
    UserSelector,
    resolve_username,
    select_identity,
)


def _user(user_id: int = 2, username: str = "bob") -> UserResult:
    now = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
    return UserResult(
        id=user_id,
        username=username,
        role="user",
        email=f"{username}@example.com",
        nickname="",
        avatar_url="",
        description="",
        row_status="normal",
        created_at=now,
        updated_at=now,
    )


class TestSelectIdentity:
    def test_id_wins_over_username_and_email(self) -> None:
        identity = select_identity(5, "x", "x@example.com")
        assert identity == UserIdentity(UserSelector.ID, 5)

    def test_username_wins_over_email(self) -> None:
        identity = select_identity(username="bob", email="carol@example.com")
        assert identity == UserIdentity(UserSelector.USERNAME, "bob")

    def test_username_is_trimmed(self) -> None:
        assert select_identity(username="  bob  ").value == "bob"

    def test_blank_username_falls_through_to_email(self) -> None:
        identity = select_identity(username="   ", email=" carol@example.com ")
        assert identity == UserIdentity(UserSelector.EMAIL, "carol@example.com")

    def test_id_zero_counts_as_set(self) -> None:
        assert select_identity(0).selector is UserSelector.ID

    def test_nothing_set(self) -> None:
        with pytest.raises(MissingIdentifierException):
            select_identity(username="", email="  ")

    def test_describe(self) -> None:
        assert UserIdentity(UserSelector.ID, 5).describe() == "user with id 5"
        assert UserIdentity(UserSelector.USERNAME, "bob").describe() == "username bob"
        assert (
            UserIdentity(UserSelector.EMAIL, "a@b.co").describe()
            == "user with email address a@b.co"
        )


class TestResolveUsername:
    async def test_username_is_not_looked_up(self) -> None:
        store = AsyncMock()
        name = await resolve_username(UserIdentity(UserSelector.USERNAME, "ghost"), store)
        assert name == "ghost"
        store.list_users.assert_not_called()

    async def test_id_lookup(self) -> None:
        store = AsyncMock()
        store.list_users = AsyncMock(return_value=[_user(2, "bob")])
        name = await resolve_username(UserIdentity(UserSelector.ID, 2), store)
        assert name == "bob"
        store.list_users.assert_awaited_once_with(FindUser(id=2))

    async def test_email_lookup(self) -> None:
        store = AsyncMock()
        store.list_users = AsyncMock(return_value=[_user(3, "carol")])
        name = await resolve_username(
            UserIdentity(UserSelector.EMAIL, "carol@example.com"), store
        )
        assert name == "carol"
        store.list_users.assert_awaited_once_with(FindUser(email="carol@example.com"))

    async def test_id_miss(self) -> None:
        store = AsyncMock()
        store.list_users = AsyncMock(return_value=[])
        with pytest.raises(UserNotFoundException) as exc_info:
            await resolve_username(UserIdentity(UserSelector.ID, 999), store)
        assert exc_info.value.message == "user with id 999 not found"

    async def test_email_miss(self) -> None:
        store = AsyncMock()
        store.list_users = AsyncMock(return_value=[])
        with pytest.raises(UserNotFoundException, match="email address nobody@example.com"):
            await resolve_username(UserIdentity(UserSelector.EMAIL, "nobody@example.com"), store)
