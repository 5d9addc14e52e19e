from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

from ..core.enums import EmployeeCategory
from ..core.exceptions import ValidationError
from .model import EMPLOYEE_TYPES, Employee

_COMMON_FIELDS = frozenset({"employee_id", "name", "email"})


@dataclass
class EmployeeFactory:
    """Factory Pattern: build the employee variant for a category."""

    def resolve(self, category: Union[EmployeeCategory, int]) -> EmployeeCategory:
        if isinstance(category, EmployeeCategory):
            return category
        return EmployeeCategory.from_code(category)

    def detail_fields(self, category: Union[EmployeeCategory, int]) -> tuple[str, ...]:
        """Category specific salary inputs, in declaration order."""
        employee_type = EMPLOYEE_TYPES[self.resolve(category)]
        return tuple(n for n in employee_type.field_names() if n not in _COMMON_FIELDS)

    def check_details(self, category: Union[EmployeeCategory, int], details: Mapping[str, Any]) -> None:
        resolved = self.resolve(category)
        unknown = sorted(set(details) - set(self.detail_fields(resolved)))
        if unknown:
            raise ValidationError(f"Unknown fields for {resolved.value}: {', '.join(unknown)}")

        employee_type = EMPLOYEE_TYPES[resolved]
        missing = [n for n in employee_type.required_fields() if n not in _COMMON_FIELDS and n not in details]
        if missing:
            raise ValidationError(f"Missing fields for {resolved.value}: {', '.join(missing)}")

    def create(
        self,
        category: Union[EmployeeCategory, int],
        *,
        employee_id: int,
        name: str,
        email: str,
        **details: Any,
    ) -> Employee:
        resolved = self.resolve(category)
        self.check_details(resolved, details)
        return self.build(resolved, employee_id=employee_id, name=name, email=email, **details)

    def build(
        self,
        category: EmployeeCategory,
        *,
        employee_id: int,
        name: str,
        email: str,
        **details: Any,
    ) -> Employee:
        """Construct without checking; callers run `check_details` first."""
        return EMPLOYEE_TYPES[category](employee_id=employee_id, name=name, email=email, **details)
