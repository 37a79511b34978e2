from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """One dated Present/Absent entry for an employee."""

    id: int | str
    employee: int | str
    date: str
    status: AttendanceStatus
