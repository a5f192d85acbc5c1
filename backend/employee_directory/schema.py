"""Startup schema management.

The ``employees`` table is brought to head through the Alembic revisions in
``migrations/versions``. Each revision inspects the live schema first, so a
database created before revisions were tracked converges without data loss
and re-running on every start is a no-op.
"""
from __future__ import annotations

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import Connection, text
from sqlalchemy.ext.asyncio import AsyncEngine

from .errors import SchemaInitError

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"


def alembic_config(connection: Connection | None = None) -> Config:
    """Alembic config bound to the packaged migrations (and optionally a live connection)."""

    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    if connection is not None:
        config.attributes["connection"] = connection
    return config


def _upgrade(connection: Connection, revision: str) -> None:
    command.upgrade(alembic_config(connection), revision)


async def ensure_schema(engine: AsyncEngine, revision: str = "head") -> None:
    """Check connectivity and apply every pending migration.

    Raises ``SchemaInitError`` on any failure; callers must not serve
    requests afterwards.
    """

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("Connected to database at %s", engine.url.render_as_string(hide_password=True))

        async with engine.begin() as conn:
            await conn.run_sync(_upgrade, revision)
    except Exception as exc:
        logger.exception("Error initializing database")
        raise SchemaInitError(str(exc)) from exc

    logger.info("Database schema is at %s", revision)
