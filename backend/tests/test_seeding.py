"""
Workboard Backend: Sample Data Seeding Tests
==============================================

What:  seed_employees() against a mocked repository (no database).
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from workboard.exceptions import StorageError
from workboard.services.seeding import SAMPLE_EMPLOYEES, seed_employees


class TestSeedEmployees:

    @pytest.mark.asyncio
    async def test_inserts_every_sample(self):
        repository = MagicMock()
        repository.create = AsyncMock(side_effect=range(1, 10))

        inserted = await seed_employees(repository)

        assert inserted == len(SAMPLE_EMPLOYEES)
        assert repository.create.await_count == len(SAMPLE_EMPLOYEES)
        repository.create.assert_any_await(SAMPLE_EMPLOYEES[0])

    @pytest.mark.asyncio
    async def test_failed_insert_is_skipped(self):
        outcomes = [StorageError("database is locked")] + list(range(1, 9))
        repository = MagicMock()
        repository.create = AsyncMock(side_effect=outcomes)

        inserted = await seed_employees(repository)

        assert inserted == len(SAMPLE_EMPLOYEES) - 1
        assert repository.create.await_count == len(SAMPLE_EMPLOYEES)
