from __future__ import annotations

from dataclasses import MISSING, dataclass, fields
from typing import Any, ClassVar, Union

from ..core.enums import EmployeeCategory


@dataclass(eq=False)
class _EmployeeFields:
    """Fields shared by every employee category.

    Note: records are mutable so updates are visible through every lookup,
    except `employee_id` which is fixed once assigned.
    """

    category: ClassVar[EmployeeCategory]

    employee_id: int
    name: str
    email: str

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "employee_id" and "employee_id" in self.__dict__:
            raise AttributeError("employee_id cannot be reassigned")
        super().__setattr__(key, value)

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def required_fields(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls) if f.default is MISSING and f.default_factory is MISSING)


@dataclass(eq=False)
class FullTimeEmployee(_EmployeeFields):
    category: ClassVar[EmployeeCategory] = EmployeeCategory.FULL_TIME

    monthly_salary: float
    bonus: float = 0.0
    deduction: float = 0.0


@dataclass(eq=False)
class PartTimeEmployee(_EmployeeFields):
    category: ClassVar[EmployeeCategory] = EmployeeCategory.PART_TIME

    hours_worked: int
    hourly_rate: float


@dataclass(eq=False)
class ContractEmployee(_EmployeeFields):
    category: ClassVar[EmployeeCategory] = EmployeeCategory.CONTRACT

    contract_amount: float


@dataclass(eq=False)
class Intern(_EmployeeFields):
    category: ClassVar[EmployeeCategory] = EmployeeCategory.INTERN

    stipend: float


Employee = Union[FullTimeEmployee, PartTimeEmployee, ContractEmployee, Intern]

EMPLOYEE_TYPES: dict[EmployeeCategory, type] = {
    EmployeeCategory.FULL_TIME: FullTimeEmployee,
    EmployeeCategory.PART_TIME: PartTimeEmployee,
    EmployeeCategory.CONTRACT: ContractEmployee,
    EmployeeCategory.INTERN: Intern,
}
