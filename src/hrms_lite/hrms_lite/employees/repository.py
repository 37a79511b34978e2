from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee, EmployeeForm


class EmployeeGateway(Protocol):
    """Access to the remote employee collection.

    The view layer depends on this interface, not on a concrete HTTP client.
    """

    def list_employees(self) -> Sequence[Employee]:
        raise NotImplementedError

    def create_employee(self, form: EmployeeForm) -> Employee:
        raise NotImplementedError

    def delete_employee(self, employee_pk: int | str) -> None:
        raise NotImplementedError
