from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status as recorded by the attendance subsystem."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    HALF_DAY = "half-day"


class DeductionType(str, Enum):
    """Per-day deduction formula selected by the policy."""

    FIXED = "fixed"
    PERCENTAGE = "percentage"
    SCALED = "scaled"
