from __future__ import annotations

import logging

from ..common.money import to_money
from ..employees.repository import EmployeeRepository
from ..records.repository import DailyRecordRepository

logger = logging.getLogger(__name__)

DEMO_EMPLOYEES = [
    {"key": "rajesh", "name": "రాజేష్ కుమార్", "employee_id": "EMP001", "contact": "9876543210"},
    {"key": "sita", "name": "సీతా దేవి", "employee_id": "EMP002", "contact": "9876543211"},
]

DEMO_RECORDS = [
    {"employee": "rajesh", "date": "2024-09-06", "macharlu": 800, "karchulu": 150, "notes": "రెగ్యులర్ పని"},
    {"employee": "rajesh", "date": "2024-09-07", "macharlu": 900, "karchulu": 200, "notes": "ఓవర్ టైం"},
    {"employee": "sita", "date": "2024-09-06", "macharlu": 750, "karchulu": 100, "notes": "రెగ్యులర్ పని"},
]


def seed_demo_data(employees: EmployeeRepository, records: DailyRecordRepository) -> bool:
    """Insert the demo employees and records into an empty store. Returns True if seeded."""
    if employees.list():
        logger.debug("Store already has employees, skipping demo seed")
        return False

    created = {}
    for item in DEMO_EMPLOYEES:
        created[item["key"]] = employees.create(
            name=item["name"],
            employee_id=item["employee_id"],
            contact=item["contact"],
            is_active=True,
        )

    for item in DEMO_RECORDS:
        records.create(
            employee_id=created[item["employee"]].id,
            date=item["date"],
            macharlu=to_money(item["macharlu"]),
            karchulu=to_money(item["karchulu"]),
            notes=item["notes"],
        )

    logger.info("Seeded %d demo employees and %d records", len(DEMO_EMPLOYEES), len(DEMO_RECORDS))
    return True
