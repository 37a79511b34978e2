from __future__ import annotations

from dataclasses import dataclass, replace

from ..common.validators import require_non_empty
from ..core.constants import EMPLOYEE_FORM_FIELDS
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Employee:
    """An employee as returned by the HR API.

    `id` is assigned by the server; `employee_id` is the external code typed in
    by whoever registered the employee.
    """

    id: int | str
    employee_id: str
    full_name: str
    email: str
    department: str


@dataclass(frozen=True)
class EmployeeForm:
    """Contents of the Add Employee form."""

    employee_id: str = ""
    full_name: str = ""
    email: str = ""
    department: str = ""

    def with_field(self, field: str, value: str) -> "EmployeeForm":
        if field not in EMPLOYEE_FORM_FIELDS:
            raise ValidationError(f"Unknown form field: {field}")
        return replace(self, **{field: value})

    def validated(self) -> "EmployeeForm":
        """Trimmed copy; raises ValidationError on any blank field."""
        return EmployeeForm(
            employee_id=require_non_empty(self.employee_id, "Employee ID"),
            full_name=require_non_empty(self.full_name, "Full Name"),
            email=require_non_empty(self.email, "Email"),
            department=require_non_empty(self.department, "Department"),
        )

    def to_payload(self) -> dict:
        return {name: getattr(self, name) for name in EMPLOYEE_FORM_FIELDS}
