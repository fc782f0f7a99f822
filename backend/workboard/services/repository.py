"""
Workboard Backend: Resource Repository
========================================

What:  Generic CRUD gateway for one table. Instantiated once for employees
       and once for tasks.
How:   Each public method builds exactly one SQLAlchemy Core statement with
       bound parameters and runs it in its own short transaction
       (engine.begin()). Rows come back as plain dicts.
Who:   Constructed by the application factory with the storage engine it owns;
       injected into the routers through workboard.dependencies.

Operation → SQL:
    initialize()       CREATE TABLE IF NOT EXISTS ...
    list_all()         SELECT * FROM t
    get_by_id(id)      SELECT * FROM t WHERE id = ?
    create(fields)     INSERT INTO t (...) VALUES (?, ...)
    update(id, fields) UPDATE t SET ... WHERE id = ?
    delete(id)         DELETE FROM t WHERE id = ?

The repository validates nothing. Missing fields are bound as NULL and the
NOT NULL column constraints reject them; any driver error is re-raised as
StorageError carrying the driver's message.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Mapping, Optional, Sequence, Type

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from workboard.database import Base
from workboard.exceptions import StorageError
from workboard.models.employee import EMPLOYEE_FIELDS, Employee
from workboard.models.task import TASK_FIELDS, Task

logger = logging.getLogger(__name__)


def _driver_message(exc: SQLAlchemyError) -> str:
    """
    Extract the database driver's own error text.

    SQLAlchemy's str() appends the SQL and a documentation link; the original
    DBAPI exception holds just the message (e.g. "no such table: tasks").
    """
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


class ResourceRepository:
    """
    Storage gateway for a single entity table.

    Args:
        storage: Engine handle owned by the application
        model:   ORM class whose __table__ this repository manages
        fields:  Writable column names, in statement order (id excluded)
    """

    def __init__(
        self,
        storage: AsyncEngine,
        model: Type[Base],
        fields: Sequence[str],
    ):
        self.storage = storage
        self.model = model
        self.table = model.__table__
        self.fields = tuple(fields)

    @property
    def name(self) -> str:
        return self.table.name

    def __repr__(self) -> str:
        return f"<ResourceRepository(table='{self.name}')>"

    # ── Statement Execution ───────────────────────────────────────────────

    @asynccontextmanager
    async def _transaction(self, operation: str) -> AsyncIterator[AsyncConnection]:
        """
        Open a connection-level transaction and translate driver failures.

        Commits when the block exits cleanly, rolls back otherwise.
        """
        try:
            async with self.storage.begin() as conn:
                yield conn
        except SQLAlchemyError as e:
            message = _driver_message(e)
            logger.error("%s on %s failed: %s", operation, self.name, message)
            raise StorageError(
                message=message,
                context={"table": self.name, "operation": operation},
            ) from e

    def _values(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        # Unknown keys are dropped; absent ones bind as NULL
        return {name: fields.get(name) for name in self.fields}

    # ── Operations ────────────────────────────────────────────────────────

    async def initialize(self) -> None:
        """
        Create the table if it does not exist yet. Safe to call repeatedly.

        Raises:
            StorageError: The database refused the DDL or is unreachable
        """
        async with self._transaction("initialize") as conn:
            await conn.run_sync(self.table.create, checkfirst=True)
        logger.info("Table '%s' initialized", self.name)

    async def list_all(self) -> List[Dict[str, Any]]:
        """Every row, in the order storage returns them (no ORDER BY)."""
        async with self._transaction("list") as conn:
            result = await conn.execute(select(self.table))
            return [dict(row) for row in result.mappings().all()]

    async def get_by_id(self, row_id: int) -> Optional[Dict[str, Any]]:
        """The matching row, or None when no row has that id."""
        async with self._transaction("get") as conn:
            result = await conn.execute(
                select(self.table).where(self.table.c.id == row_id)
            )
            row = result.mappings().first()
        return dict(row) if row is not None else None

    async def create(self, fields: Mapping[str, Any]) -> int:
        """
        Insert a row and return the identifier storage assigned to it.

        Raises:
            StorageError: e.g. "NOT NULL constraint failed: employees.email"
        """
        async with self._transaction("create") as conn:
            result = await conn.execute(insert(self.table).values(**self._values(fields)))
            new_id = result.inserted_primary_key[0]
        logger.debug("Inserted %s row %s", self.name, new_id)
        return new_id

    async def update(self, row_id: int, fields: Mapping[str, Any]) -> int:
        """
        Overwrite every writable column of the row.

        Returns:
            Affected-row count: 1, or 0 when the id matches nothing
        """
        async with self._transaction("update") as conn:
            result = await conn.execute(
                update(self.table)
                .where(self.table.c.id == row_id)
                .values(**self._values(fields))
            )
            return result.rowcount

    async def delete(self, row_id: int) -> int:
        """Remove the row. Returns the affected-row count (0 or 1)."""
        async with self._transaction("delete") as conn:
            result = await conn.execute(
                delete(self.table).where(self.table.c.id == row_id)
            )
            return result.rowcount


# ── Concrete Repositories ─────────────────────────────────────────────────

def build_employee_repository(storage: AsyncEngine) -> ResourceRepository:
    return ResourceRepository(storage, Employee, EMPLOYEE_FIELDS)


def build_task_repository(storage: AsyncEngine) -> ResourceRepository:
    return ResourceRepository(storage, Task, TASK_FIELDS)
