from __future__ import annotations

from typing import Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceGateway
from ..core.enums import AttendanceStatus
from ..core.exceptions import ApiError
from ..employees.model import Employee, EmployeeForm
from ..employees.repository import EmployeeGateway
from .connection import HttpConnection


class HrApiClient(EmployeeGateway, AttendanceGateway):
    def __init__(self, conn: HttpConnection):
        self._conn = conn

    def list_employees(self) -> Sequence[Employee]:
        rows = self._conn.request("GET", "employees") or []
        return [self._to_employee(row) for row in rows]

    def create_employee(self, form: EmployeeForm) -> Employee:
        row = self._conn.request("POST", "employees", json=form.to_payload())
        return self._to_employee(row)

    def delete_employee(self, employee_pk: int | str) -> None:
        self._conn.request("DELETE", f"employees/{employee_pk}")

    def list_attendance(self, employee_pk: int | str) -> Sequence[AttendanceRecord]:
        rows = self._conn.request("GET", f"employees/{employee_pk}/attendance") or []
        return [self._to_attendance(row, employee_pk) for row in rows]

    def mark_attendance(
        self,
        employee_pk: int | str,
        *,
        date: str,
        status: AttendanceStatus,
    ) -> AttendanceRecord:
        row = self._conn.request(
            "POST",
            f"employees/{employee_pk}/attendance",
            json={"date": date, "status": AttendanceStatus(status).value},
        )
        return self._to_attendance(row, employee_pk)

    @staticmethod
    def _to_employee(row) -> Employee:
        if not isinstance(row, dict):
            raise ApiError("Unexpected employee payload")
        if "id" not in row:
            raise ApiError("Employee payload has no id")
        return Employee(
            id=row["id"],
            employee_id=str(row.get("employee_id", "")),
            full_name=row.get("full_name", ""),
            email=row.get("email", ""),
            department=row.get("department", ""),
        )

    @staticmethod
    def _to_attendance(row, employee_pk) -> AttendanceRecord:
        if not isinstance(row, dict):
            raise ApiError("Unexpected attendance payload")
        try:
            status = AttendanceStatus(row["status"])
        except (KeyError, ValueError):
            raise ApiError(f"Unknown attendance status: {row.get('status')}")
        if "id" not in row or "date" not in row:
            raise ApiError("Attendance payload is incomplete")
        return AttendanceRecord(
            id=row["id"],
            employee=row.get("employee", employee_pk),
            date=str(row["date"]),
            status=status,
        )
