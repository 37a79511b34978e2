"""State transitions for the HRMS screen.

Every function here is pure: it takes a ViewState and returns a new one.
Functions that finish a request take the token the request started with and
return the state untouched when that token is stale.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable

from ..attendance.model import AttendanceRecord
from ..core.constants import LOAD_EMPLOYEES_FAILED, REQUEST_FAILED
from ..core.enums import ScreenPhase
from ..employees.model import Employee, EmployeeForm
from .state import ViewState

logger = logging.getLogger(__name__)


def load_started(state: ViewState) -> ViewState:
    phase = ScreenPhase.LOADING if state.phase == ScreenPhase.UNINITIALIZED else state.phase
    return replace(
        state,
        phase=phase,
        loading=True,
        error="",
        employees_token=state.employees_token + 1,
    )


def load_succeeded(state: ViewState, token: int, employees: Iterable[Employee]) -> ViewState:
    if token != state.employees_token:
        logger.debug("Dropping stale employee list (token %s, current %s)", token, state.employees_token)
        return state
    return replace(state, phase=ScreenPhase.READY, employees=tuple(employees), loading=False)


def load_failed(state: ViewState, token: int, message: str) -> ViewState:
    if token != state.employees_token:
        logger.debug("Dropping stale load failure (token %s, current %s)", token, state.employees_token)
        return state
    # Only the first load is fatal; after that the list stays on screen.
    phase = ScreenPhase.READY if state.phase == ScreenPhase.READY else ScreenPhase.ERROR
    return replace(state, phase=phase, loading=False, error=message or LOAD_EMPLOYEES_FAILED)


def action_started(state: ViewState) -> ViewState:
    return replace(state, error="")


def operation_failed(state: ViewState, message: str) -> ViewState:
    return replace(state, error=message or REQUEST_FAILED)


def form_field_changed(state: ViewState, field: str, value: str) -> ViewState:
    return replace(state, form=state.form.with_field(field, value))


def form_cleared(state: ViewState) -> ViewState:
    return replace(state, form=EmployeeForm())


def employee_selected(state: ViewState, employee: Employee) -> ViewState:
    return replace(
        state,
        selected=employee,
        attendance=(),
        attendance_token=state.attendance_token + 1,
    )


def selection_cleared(state: ViewState) -> ViewState:
    return replace(state, selected=None, attendance=(), attendance_token=state.attendance_token + 1)


def employee_removed(state: ViewState, employee_pk) -> ViewState:
    if state.selected is not None and str(state.selected.id) == str(employee_pk):
        return selection_cleared(state)
    return state


def attendance_loaded(state: ViewState, token: int, records: Iterable[AttendanceRecord]) -> ViewState:
    if token != state.attendance_token:
        logger.debug("Dropping stale attendance list (token %s, current %s)", token, state.attendance_token)
        return state
    return replace(state, attendance=tuple(records))


def attendance_failed(state: ViewState, token: int, message: str) -> ViewState:
    if token != state.attendance_token:
        return state
    return operation_failed(state, message)
