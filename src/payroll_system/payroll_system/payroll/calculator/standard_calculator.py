from __future__ import annotations

from typing import Callable

from ...core.enums import EmployeeCategory
from ...employees.model import ContractEmployee, Employee, FullTimeEmployee, Intern, PartTimeEmployee
from .base import SalaryCalculator


def _full_time_salary(e: FullTimeEmployee) -> float:
    # Not clamped: a large deduction yields a negative net.
    return e.monthly_salary + e.bonus - e.deduction


def _part_time_salary(e: PartTimeEmployee) -> float:
    return e.hours_worked * e.hourly_rate


def _contract_salary(e: ContractEmployee) -> float:
    return e.contract_amount


def _intern_salary(e: Intern) -> float:
    return e.stipend


_SALARY_RULES: dict[EmployeeCategory, Callable] = {
    EmployeeCategory.FULL_TIME: _full_time_salary,
    EmployeeCategory.PART_TIME: _part_time_salary,
    EmployeeCategory.CONTRACT: _contract_salary,
    EmployeeCategory.INTERN: _intern_salary,
}


class StandardSalaryCalculator(SalaryCalculator):
    """Standard rules, one formula per category, no rounding."""

    def calculate_salary(self, employee: Employee) -> float:
        return _SALARY_RULES[employee.category](employee)

    def salary_breakdown(self, employee: Employee) -> str:
        net = self.calculate_salary(employee)
        if employee.category is EmployeeCategory.FULL_TIME:
            return (
                f"Monthly: {employee.monthly_salary:.2f} | Bonus: {employee.bonus:.2f} | "
                f"Deduction: {employee.deduction:.2f} | Net: {net:.2f}"
            )
        if employee.category is EmployeeCategory.PART_TIME:
            return f"Hours: {employee.hours_worked} | Rate: {employee.hourly_rate:.2f} | Net: {net:.2f}"
        return super().salary_breakdown(employee)
