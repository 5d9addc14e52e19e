from __future__ import annotations

from abc import ABC, abstractmethod

from ...employees.model import Employee


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate_salary(self, employee: Employee) -> float:
        raise NotImplementedError

    def salary_breakdown(self, employee: Employee) -> str:
        return f"Base salary: {self.calculate_salary(employee):.2f}"
