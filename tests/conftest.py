from __future__ import annotations

import pytest

from src.payroll_system.payroll_system.employees.memory_repository import InMemoryEmployeeRepository
from src.payroll_system.payroll_system.employees.service import EmployeeService
from src.payroll_system.payroll_system.payroll.service import PayslipService


@pytest.fixture
def repo() -> InMemoryEmployeeRepository:
    return InMemoryEmployeeRepository()


@pytest.fixture
def employees(repo) -> EmployeeService:
    return EmployeeService(repo)


@pytest.fixture
def payslips(repo) -> PayslipService:
    return PayslipService(repo)
