from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily attendance status accepted by the HR API."""

    PRESENT = "Present"
    ABSENT = "Absent"


class ScreenPhase(str, Enum):
    """Top-level state of the single screen."""

    UNINITIALIZED = "UNINITIALIZED"
    LOADING = "LOADING"
    READY = "READY"
    ERROR = "ERROR"
