from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Callable, Optional

from ..attendance.repository import AttendanceGateway
from ..common.datetime_utils import now_local, today_iso
from ..core.constants import DELETE_CONFIRM_PROMPT
from ..core.enums import AttendanceStatus
from ..core.exceptions import DomainError, ValidationError
from ..employees.model import Employee, EmployeeForm
from ..employees.repository import EmployeeGateway
from . import reducer
from .render import render_view
from .state import ViewState

logger = logging.getLogger(__name__)

ConfirmFn = Callable[[str], bool]
AlertFn = Callable[[str], None]


def _decline(_prompt: str) -> bool:
    return False


def _log_alert(message: str) -> None:
    logger.warning("alert: %s", message)


class ViewController:
    """Use case: drive the single HRMS screen.

    Each action issues at most one request, waits for it, then applies a
    reducer transition. Transitions run under a lock; requests do not, so
    overlapping actions from different threads are resolved by the tokens
    kept in ViewState rather than by arrival order.
    """

    def __init__(
        self,
        employees: EmployeeGateway,
        attendance: AttendanceGateway,
        *,
        confirm: Optional[ConfirmFn] = None,
        alert: Optional[AlertFn] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._employees = employees
        self._attendance = attendance
        self._confirm = confirm or _decline
        self._alert = alert or _log_alert
        self._clock = clock
        self._lock = threading.Lock()
        self._state = ViewState()

    @property
    def state(self) -> ViewState:
        return self._state

    def _apply(self, transition, *args) -> ViewState:
        with self._lock:
            self._state = transition(self._state, *args)
            return self._state

    def render(self, **extra) -> str:
        return render_view(self._state, **extra)

    def start(self) -> ViewState:
        """Fresh screen: drop all state and run the initial load."""
        with self._lock:
            self._state = ViewState()
        return self.load_employees()

    def load_employees(self) -> ViewState:
        token = self._apply(reducer.load_started).employees_token
        try:
            employees = self._employees.list_employees()
        except DomainError as e:
            logger.warning("Loading employees failed: %s", e)
            return self._apply(reducer.load_failed, token, str(e))
        logger.debug("Loaded %d employees", len(employees))
        return self._apply(reducer.load_succeeded, token, employees)

    def update_form(self, field: str, value: str) -> ViewState:
        try:
            return self._apply(reducer.form_field_changed, field, value)
        except ValidationError as e:
            return self._apply(reducer.operation_failed, str(e))

    def add_employee(self, form: Optional[EmployeeForm] = None) -> bool:
        form = form or self._state.form
        self._apply(reducer.action_started)
        try:
            created = self._employees.create_employee(form.validated())
        except DomainError as e:
            # Add rejections go to the alert port only, not the banner.
            logger.info("Add employee rejected: %s", e)
            self._alert(str(e))
            return False

        logger.info("Added employee %s (%s)", created.employee_id, created.id)
        self._apply(reducer.form_cleared)
        self.load_employees()
        return True

    def delete_employee(self, employee_pk, *, confirm: Optional[ConfirmFn] = None) -> bool:
        confirm = confirm or self._confirm
        if not confirm(DELETE_CONFIRM_PROMPT):
            return False

        self._apply(reducer.action_started)
        try:
            self._employees.delete_employee(employee_pk)
        except DomainError as e:
            logger.warning("Delete employee %s failed: %s", employee_pk, e)
            self._apply(reducer.operation_failed, str(e))
            return False

        logger.info("Deleted employee %s", employee_pk)
        self._apply(reducer.employee_removed, employee_pk)
        self.load_employees()
        return True

    def select_employee(self, employee: Employee) -> ViewState:
        self._apply(reducer.action_started)
        token = self._apply(reducer.employee_selected, employee).attendance_token
        try:
            records = self._attendance.list_attendance(employee.id)
        except DomainError as e:
            logger.warning("Loading attendance for %s failed: %s", employee.id, e)
            return self._apply(reducer.attendance_failed, token, str(e))
        return self._apply(reducer.attendance_loaded, token, records)

    def find_employee(self, employee_pk) -> Optional[Employee]:
        for employee in self._state.employees:
            if str(employee.id) == str(employee_pk):
                return employee
        return None

    def select_employee_by_pk(self, employee_pk) -> ViewState:
        employee = self.find_employee(employee_pk)
        if employee is None:
            return self._apply(reducer.operation_failed, "Employee not found")
        return self.select_employee(employee)

    def mark_attendance(self, status) -> bool:
        employee = self._state.selected
        try:
            if employee is None:
                raise ValidationError("No employee selected")
            try:
                status = AttendanceStatus(status)
            except ValueError:
                raise ValidationError(f"Invalid attendance status: {status}")

            self._apply(reducer.action_started)
            self._attendance.mark_attendance(employee.id, date=today_iso(self._clock()), status=status)
        except DomainError as e:
            logger.warning("Marking attendance failed: %s", e)
            self._apply(reducer.operation_failed, str(e))
            return False

        self.select_employee(employee)
        return True
