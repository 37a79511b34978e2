from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..attendance.model import AttendanceRecord
from ..core.enums import ScreenPhase
from ..employees.model import Employee, EmployeeForm


@dataclass(frozen=True)
class ViewState:
    """Everything the screen renders from.

    Transient and process-local. `employees_token` and `attendance_token` are
    generation counters: a response is applied only if it carries the token
    that was current when its request started.
    """

    phase: ScreenPhase = ScreenPhase.UNINITIALIZED
    employees: Tuple[Employee, ...] = ()
    loading: bool = False
    error: str = ""
    selected: Optional[Employee] = None
    attendance: Tuple[AttendanceRecord, ...] = ()
    form: EmployeeForm = field(default_factory=EmployeeForm)
    employees_token: int = 0
    attendance_token: int = 0

    @property
    def is_fatal(self) -> bool:
        return self.phase == ScreenPhase.ERROR
