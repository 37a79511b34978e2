from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceGateway(Protocol):
    def list_attendance(self, employee_pk: int | str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def mark_attendance(
        self,
        employee_pk: int | str,
        *,
        date: str,
        status: AttendanceStatus,
    ) -> AttendanceRecord:
        raise NotImplementedError
