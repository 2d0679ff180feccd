"""Store bootstrap: open the driver, apply migrations, then hand out a Store.

Reads and writes against an unmigrated schema are undefined, so
bootstrap_store is the only way code outside this package obtains a Store.
"""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from jotter.core.config import Settings
from jotter.infrastructure.exceptions import DriverInitException, MigrationException
from jotter.infrastructure.persistence.database import create_engine
from jotter.infrastructure.persistence.store import Store

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent / "migrations"


def alembic_config(settings: Settings) -> Config:
    """Alembic Config pointing at the bundled migrations (no alembic.ini needed)."""
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    cfg.set_main_option("sqlalchemy.url", settings.database_url.replace("%", "%%"))
    return cfg


def _upgrade(connection: Connection, cfg: Config) -> None:
    cfg.attributes["connection"] = connection
    command.upgrade(cfg, "head")


async def open_driver(settings: Settings) -> AsyncEngine:
    """Create the engine and prove it can connect.

    Raises:
        DriverInitException: engine creation or the first connection failed.
    """
    try:
        engine = create_engine(settings)
    except (SQLAlchemyError, ImportError, ValueError) as e:
        logger.error("failed to create db driver: %s", e)
        raise DriverInitException(settings.driver, str(e)) from e
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        await engine.dispose()
        logger.error("failed to create db driver: %s", e)
        raise DriverInitException(settings.driver, str(e)) from e
    return engine


async def migrate(engine: AsyncEngine, settings: Settings) -> None:
    """Apply all pending Alembic revisions in one transaction.

    Raises:
        MigrationException: any migration step failed.
    """
    cfg = alembic_config(settings)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(_upgrade, cfg)
    except Exception as e:
        logger.error("failed to migrate db: %s", e)
        raise MigrationException(str(e)) from e
    logger.info("Database schema is up to date")


async def bootstrap_store(settings: Settings) -> Store:
    """Open the driver, migrate, and return a Store bound to the engine.

    The engine is disposed when either step fails.
    """
    engine = await open_driver(settings)
    try:
        await migrate(engine, settings)
    except MigrationException:
        await engine.dispose()
        raise
    return Store(engine, settings)
