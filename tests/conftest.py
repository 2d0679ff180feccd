"""Pytest configuration and fixtures for jotter.

Integration fixtures run against a real SQLite database created in
tmp_path and migrated through bootstrap_store. All imports use jotter.*.
"""

import asyncio
from pathlib import Path

import pytest

from jotter.application.dtos.user import UserResult
from jotter.core.config import Settings
from jotter.domain.enums import UserRole
from jotter.infrastructure.persistence.bootstrap import bootstrap_store
from jotter.infrastructure.persistence.store import Store
from jotter.infrastructure.security.password import get_password_hash

OLD_PASSWORD = "old-password"


def make_settings(data_dir: Path, **overrides) -> Settings:
    """Settings for a throwaway SQLite database in data_dir."""
    values = {"data_dir": data_dir, "mode": "dev", "port": 8081, "secret_key": "test-secret"}
    values.update(overrides)
    return Settings(**values)


async def seed_users(settings: Settings) -> dict[str, UserResult]:
    """Create alice (host), bob and carol in the database for settings."""
    store = await bootstrap_store(settings)
    try:
        old_hash = get_password_hash(OLD_PASSWORD)
        return {
            "alice": await store.create_user(
                "alice",
                old_hash,
                role=UserRole.HOST.value,
                email="alice@example.com",
                nickname="Alice",
            ),
            "bob": await store.create_user(
                "bob", old_hash, role=UserRole.USER.value, email="bob@example.com"
            ),
            "carol": await store.create_user(
                "carol", old_hash, role=UserRole.USER.value, email="carol@example.com"
            ),
        }
    finally:
        await store.close()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at an empty data directory."""
    return make_settings(tmp_path)


@pytest.fixture
def seeded_settings(settings: Settings) -> tuple[Settings, dict[str, UserResult]]:
    """Settings whose database already holds alice, bob and carol.

    For sync tests only (CLI): seeding runs in its own event loop.
    """
    users = asyncio.run(seed_users(settings))
    return settings, users


@pytest.fixture
async def store(settings: Settings) -> Store:
    """Migrated store for settings; closed after the test."""
    store = await bootstrap_store(settings)
    yield store
    await store.close()


@pytest.fixture
async def users(settings: Settings) -> dict[str, UserResult]:
    """Seed alice, bob and carol for async tests; keyed by username."""
    return await seed_users(settings)
