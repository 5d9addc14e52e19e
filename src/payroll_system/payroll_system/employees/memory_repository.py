from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.constants import INITIAL_EMPLOYEE_ID
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class InMemoryEmployeeRepository(EmployeeRepository):
    """Ordered in-process store; also owns the identity counter."""

    def __init__(self, *, initial_id: int = INITIAL_EMPLOYEE_ID):
        self._employees: list[Employee] = []
        self._last_id = int(initial_id)

    def next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    def add(self, employee: Employee) -> None:
        self._employees.append(employee)
        logger.info("Added employee %s (%s)", employee.employee_id, employee.category.value)

    def remove(self, employee_id: int) -> bool:
        for index, employee in enumerate(self._employees):
            if employee.employee_id == employee_id:
                del self._employees[index]
                logger.info("Removed employee with ID %s", employee_id)
                return True
        logger.debug("No employee found with ID %s", employee_id)
        return False

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        for employee in self._employees:
            if employee.employee_id == employee_id:
                return employee
        return None

    def search_by_name(self, name_part: str) -> Sequence[Employee]:
        lowered = name_part.lower()
        return [e for e in self._employees if lowered in e.name.lower()]

    def list_all(self) -> Sequence[Employee]:
        return list(self._employees)

    def count(self) -> int:
        return len(self._employees)
