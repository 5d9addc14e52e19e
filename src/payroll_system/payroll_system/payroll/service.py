from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import PAYSLIP_FOOTER, PAYSLIP_HEADER
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .calculator.base import SalaryCalculator
from .calculator.standard_calculator import StandardSalaryCalculator


@dataclass(frozen=True)
class Payslip:
    employee_id: int
    name: str
    category: str
    breakdown: str
    net_salary: float

    def render(self) -> str:
        return "\n".join(
            [
                PAYSLIP_HEADER,
                f"ID: {self.employee_id}",
                f"Name: {self.name}",
                f"Type: {self.category}",
                self.breakdown,
                PAYSLIP_FOOTER,
            ]
        )


class PayslipService:
    def __init__(
        self,
        employees: EmployeeRepository,
        *,
        calculator: Optional[SalaryCalculator] = None,
    ):
        self._employees = employees
        self._calculator = calculator or StandardSalaryCalculator()

    def summary(self, employee: Employee) -> str:
        """One line used by list and search output."""
        salary = self._calculator.calculate_salary(employee)
        return (
            f"ID:{employee.employee_id} | Name:{employee.name} | "
            f"Type:{employee.category.value} | Salary:{salary:.2f}"
        )

    def generate_payslip(self, employee_id: int) -> Optional[Payslip]:
        employee = self._employees.find_by_id(int(employee_id))
        if not employee:
            return None
        return Payslip(
            employee_id=employee.employee_id,
            name=employee.name,
            category=employee.category.value,
            breakdown=self._calculator.salary_breakdown(employee),
            net_salary=self._calculator.calculate_salary(employee),
        )

    def generate_payslip_text(self, employee_id: int) -> Optional[str]:
        payslip = self.generate_payslip(employee_id)
        return payslip.render() if payslip else None

    def total_payroll(self) -> float:
        return float(sum(self._calculator.calculate_salary(e) for e in self._employees.list_all()))
