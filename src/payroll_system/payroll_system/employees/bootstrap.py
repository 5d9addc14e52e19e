from __future__ import annotations

import logging

from ..core.enums import EmployeeCategory
from .service import EmployeeService

logger = logging.getLogger(__name__)


def seed_demo_employees(employees: EmployeeService) -> None:
    """Populate one employee of each category for demos."""

    employees.hire(EmployeeCategory.FULL_TIME, name="Vikas", email="vikas@example.com", monthly_salary=70000.0, bonus=2000.0)
    employees.hire(EmployeeCategory.PART_TIME, name="Manish", email="manish@example.com", hours_worked=40, hourly_rate=100.0)
    employees.hire(EmployeeCategory.CONTRACT, name="Raj", email="raj@example.com", contract_amount=50000.0)
    employees.hire(EmployeeCategory.INTERN, name="Ria", email="ria@example.com", stipend=5000.0)
    logger.info("Demo employees seeded")
