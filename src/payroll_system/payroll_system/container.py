from __future__ import annotations

from dataclasses import dataclass

from .employees.factory import EmployeeFactory
from .employees.memory_repository import InMemoryEmployeeRepository
from .employees.service import EmployeeService
from .payroll.calculator.standard_calculator import StandardSalaryCalculator
from .payroll.service import PayslipService


@dataclass(frozen=True)
class Container:
    employees_repo: InMemoryEmployeeRepository
    employee_factory: EmployeeFactory
    salary_calculator: StandardSalaryCalculator

    employee_service: EmployeeService
    payslip_service: PayslipService


def build_container() -> Container:
    employees_repo = InMemoryEmployeeRepository()
    employee_factory = EmployeeFactory()
    salary_calculator = StandardSalaryCalculator()

    employee_service = EmployeeService(employees_repo, factory=employee_factory)
    payslip_service = PayslipService(employees_repo, calculator=salary_calculator)

    return Container(
        employees_repo=employees_repo,
        employee_factory=employee_factory,
        salary_calculator=salary_calculator,
        employee_service=employee_service,
        payslip_service=payslip_service,
    )
