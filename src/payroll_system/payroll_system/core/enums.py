from __future__ import annotations

from enum import Enum

from .constants import CONTRACT_CODE, FULL_TIME_CODE, INTERN_CODE, PART_TIME_CODE
from .exceptions import ValidationError


class EmployeeCategory(str, Enum):
    """Employee category; the value is the tag shown on lists and payslips."""

    FULL_TIME = "FullTimeEmployee"
    PART_TIME = "PartTimeEmployee"
    CONTRACT = "ContractEmployee"
    INTERN = "Intern"

    @classmethod
    def from_code(cls, code: int) -> "EmployeeCategory":
        # bool is an int subclass; only real integer codes are accepted
        if isinstance(code, bool) or not isinstance(code, int) or code not in _BY_CODE:
            raise ValidationError(f"Invalid employee type: {code}")
        return _BY_CODE[code]


_BY_CODE = {
    FULL_TIME_CODE: EmployeeCategory.FULL_TIME,
    PART_TIME_CODE: EmployeeCategory.PART_TIME,
    CONTRACT_CODE: EmployeeCategory.CONTRACT,
    INTERN_CODE: EmployeeCategory.INTERN,
}
