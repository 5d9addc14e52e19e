from __future__ import annotations

from typing import Any, Optional, Sequence, Union

from ..core.enums import EmployeeCategory
from ..core.exceptions import ValidationError
from .factory import EmployeeFactory
from .model import Employee
from .repository import EmployeeRepository


class EmployeeService:
    """Use cases: hire, dismiss, look up and update employees.

    Values are trusted as given (negative amounts included); only the
    category and the field names are checked.
    """

    def __init__(self, employees: EmployeeRepository, *, factory: Optional[EmployeeFactory] = None):
        self._employees = employees
        self._factory = factory or EmployeeFactory()

    def hire(
        self,
        category: Union[EmployeeCategory, int],
        *,
        name: str,
        email: str,
        **details: Any,
    ) -> Employee:
        resolved = self._factory.resolve(category)
        self._factory.check_details(resolved, details)

        employee = self._factory.build(
            resolved,
            employee_id=self._employees.next_id(),
            name=name,
            email=email,
            **details,
        )
        self._employees.add(employee)
        return employee

    def dismiss(self, employee_id: int) -> bool:
        return self._employees.remove(int(employee_id))

    def find(self, employee_id: int) -> Optional[Employee]:
        return self._employees.find_by_id(int(employee_id))

    def search(self, name_part: str) -> Sequence[Employee]:
        return self._employees.search_by_name(name_part)

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def updatable_fields(self, employee: Employee) -> tuple[str, ...]:
        return ("name", "email") + self._factory.detail_fields(employee.category)

    def update(self, employee_id: int, /, **changes: Any) -> Optional[Employee]:
        employee = self.find(employee_id)
        if not employee:
            return None

        unknown = sorted(set(changes) - set(self.updatable_fields(employee)))
        if unknown:
            raise ValidationError(f"Cannot update {', '.join(unknown)} on {employee.category.value}")

        for field_name, value in changes.items():
            setattr(employee, field_name, value)
        return employee
