from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for employees.

    Note: services depend on this interface, and "not found" is reported
    through Optional/bool results, never through exceptions. Payslip text is
    built from these records by `payroll.service.PayslipService`.
    """

    def next_id(self) -> int:
        raise NotImplementedError

    def add(self, employee: Employee) -> None:
        raise NotImplementedError

    def remove(self, employee_id: int) -> bool:
        raise NotImplementedError

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def search_by_name(self, name_part: str) -> Sequence[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
