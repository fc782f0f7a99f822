"""
Workboard Backend: Sample Data
================================

Inserts a fixed set of sample employees after the employees table has been
created, so a fresh in-memory instance has something to list. Enabled by the
SEED_SAMPLE_DATA setting. Each insert is independent: a failure is logged and
the remaining records are still attempted.
"""

import logging
from typing import Dict, List

from workboard.exceptions import StorageError
from workboard.services.repository import ResourceRepository

logger = logging.getLogger(__name__)


SAMPLE_EMPLOYEES: List[Dict[str, str]] = [
    {"name": "John Doe", "email": "john@example.com", "phone": "1234567890",
     "address": "123 Elm Street", "joining_date": "2020-01-01"},
    {"name": "Jane Smith", "email": "jane@example.com", "phone": "0987654321",
     "address": "456 Oak Street", "joining_date": "2019-05-15"},
    {"name": "Bob Johnson", "email": "bob@example.com", "phone": "1231231234",
     "address": "789 Pine Street", "joining_date": "2021-07-23"},
    {"name": "Alice Brown", "email": "alice@example.com", "phone": "2345678901",
     "address": "234 Maple Street", "joining_date": "2022-02-10"},
    {"name": "Charlie Davis", "email": "charlie@example.com", "phone": "3456789012",
     "address": "567 Birch Street", "joining_date": "2018-11-30"},
    {"name": "Diana Evans", "email": "diana@example.com", "phone": "4567890123",
     "address": "890 Cedar Street", "joining_date": "2017-08-20"},
    {"name": "Ethan Foster", "email": "ethan@example.com", "phone": "5678901234",
     "address": "123 Spruce Street", "joining_date": "2021-06-14"},
    {"name": "Fiona Green", "email": "fiona@example.com", "phone": "6789012345",
     "address": "456 Fir Street", "joining_date": "2020-12-25"},
    {"name": "George Harris", "email": "george@example.com", "phone": "7890123456",
     "address": "789 Redwood Street", "joining_date": "2019-09-05"},
]


async def seed_employees(repository: ResourceRepository) -> int:
    """
    Insert SAMPLE_EMPLOYEES through the repository.

    Returns:
        Number of records inserted successfully
    """
    inserted = 0
    for employee in SAMPLE_EMPLOYEES:
        try:
            await repository.create(employee)
        except StorageError as e:
            logger.error("Error inserting sample employee %s: %s", employee["name"], e.message)
            continue
        inserted += 1

    logger.info("Seeded %d of %d sample employees", inserted, len(SAMPLE_EMPLOYEES))
    return inserted
