"""
Workboard Backend: Storage Engine Handle
==========================================

What:  Construction and teardown of the async SQLAlchemy engine, plus the
       declarative Base shared by the table models.
How:   create_storage() builds an AsyncEngine for a URL; the application
       factory owns the returned handle and passes it to each repository.
       There is no module-level engine: every app (and every test) gets its own.
Who:   Called by main.create_app() and by the repository tests.

In-memory SQLite:
    Each new SQLite connection to ":memory:" opens a separate, empty database.
    The engine therefore keeps exactly one connection (a queue pool of size 1
    with no overflow) and never closes it while the engine lives. Checkouts of
    that connection are exclusive: a second request waits for the first
    one's transaction to commit or roll back and the connection to return to
    the pool, so two transactions never interleave on the shared connection.

Connection Pooling (other URLs):
    SQLAlchemy's default pool for the dialect, with pool_pre_ping so a
    restarted database server does not surface as a stale-connection error.
"""

import logging
from typing import Any, Dict

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import AsyncAdaptedQueuePool

from workboard.config import Settings

logger = logging.getLogger(__name__)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Models register their tables on Base.metadata; repositories read the
    Table objects from there to build Core statements.
    """
    pass


# ── Engine Construction ───────────────────────────────────────────────────
def create_storage(config: Settings) -> AsyncEngine:
    """
    Build the async engine described by the settings.

    No connection is opened here; the first statement does that.

    Args:
        config: Application settings (database_url, db_echo)

    Returns:
        An AsyncEngine ready to hand to ResourceRepository instances.
    """
    options: Dict[str, Any] = {"echo": config.db_echo}

    if config.is_sqlite:
        # aiosqlite hands the connection to a worker thread
        options["connect_args"] = {"check_same_thread": False}
        if config.is_in_memory:
            options["poolclass"] = AsyncAdaptedQueuePool
            options["pool_size"] = 1
            options["max_overflow"] = 0
    else:
        options["pool_pre_ping"] = True

    engine = create_async_engine(config.database_url, **options)
    logger.debug("Storage engine created for %s", engine.url.render_as_string(hide_password=True))
    return engine


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def ping_storage(engine: AsyncEngine) -> None:
    """
    Run SELECT 1 against the engine.

    Raises whatever the driver raises when the database is unreachable;
    the health route turns that into an "unhealthy" status.
    """
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def dispose_storage(engine: AsyncEngine) -> None:
    """
    What:  Closes all pooled connections.
    When:  Called during application shutdown (lifespan handler).
    Note:  For in-memory SQLite this discards the data.
    """
    await engine.dispose()
