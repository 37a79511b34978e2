from __future__ import annotations

from datetime import datetime

import pytest

from hrms_lite.attendance.model import AttendanceRecord
from hrms_lite.core.enums import AttendanceStatus
from hrms_lite.core.exceptions import ApiError
from hrms_lite.employees.model import Employee, EmployeeForm
from hrms_lite.view.controller import ViewController


class FakeHrApi:
    """In-memory stand-in for the remote HR API that records every call."""

    def __init__(self, employees=(), attendance=None):
        self.employees = list(employees)
        self.attendance = {k: list(v) for k, v in (attendance or {}).items()}
        self.calls: list[tuple] = []
        self.fail: dict[str, str] = {}
        self._next_id = 100

    def _maybe_fail(self, op: str) -> None:
        if op in self.fail:
            raise ApiError(self.fail[op])

    def list_employees(self):
        self.calls.append(("list_employees",))
        self._maybe_fail("list_employees")
        return list(self.employees)

    def create_employee(self, form: EmployeeForm):
        self.calls.append(("create_employee", form))
        self._maybe_fail("create_employee")
        self._next_id += 1
        emp = Employee(
            id=self._next_id,
            employee_id=form.employee_id,
            full_name=form.full_name,
            email=form.email,
            department=form.department,
        )
        self.employees.append(emp)
        return emp

    def delete_employee(self, employee_pk):
        self.calls.append(("delete_employee", employee_pk))
        self._maybe_fail("delete_employee")
        self.employees = [e for e in self.employees if e.id != employee_pk]

    def list_attendance(self, employee_pk):
        self.calls.append(("list_attendance", employee_pk))
        self._maybe_fail("list_attendance")
        return list(self.attendance.get(employee_pk, []))

    def mark_attendance(self, employee_pk, *, date, status):
        self.calls.append(("mark_attendance", employee_pk, date, status))
        self._maybe_fail("mark_attendance")
        self._next_id += 1
        rec = AttendanceRecord(id=self._next_id, employee=employee_pk, date=date, status=AttendanceStatus(status))
        self.attendance.setdefault(employee_pk, []).append(rec)
        return rec

    def names(self) -> list[str]:
        return [c[0] for c in self.calls]


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 14, 23, 30, 0)


@pytest.fixture
def alice() -> Employee:
    return Employee(id=1, employee_id="E001", full_name="Alice Nguyen", email="alice@example.com", department="Finance")


@pytest.fixture
def bob() -> Employee:
    return Employee(id=2, employee_id="E002", full_name="Bob Tran", email="bob@example.com", department="IT")


@pytest.fixture
def api(alice, bob) -> FakeHrApi:
    return FakeHrApi(
        employees=[alice, bob],
        attendance={
            1: [AttendanceRecord(id=11, employee=1, date="2025-03-13", status=AttendanceStatus.PRESENT)],
            2: [
                AttendanceRecord(id=21, employee=2, date="2025-03-12", status=AttendanceStatus.ABSENT),
                AttendanceRecord(id=22, employee=2, date="2025-03-13", status=AttendanceStatus.PRESENT),
            ],
        },
    )


@pytest.fixture
def alerts() -> list:
    return []


@pytest.fixture
def screen(api, alerts, fixed_now) -> ViewController:
    return ViewController(api, api, alert=alerts.append, clock=lambda: fixed_now)
