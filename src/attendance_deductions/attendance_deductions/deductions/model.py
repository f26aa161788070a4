from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LateDayEntry:
    date: str
    late_minutes: int
    day_deduction: float

    def to_dict(self) -> dict[str, Any]:
        return {"date": self.date, "lateMinutes": self.late_minutes, "dayDeduction": self.day_deduction}


@dataclass(frozen=True)
class DeductionDetail:
    """Per-employee result of one evaluation run."""

    employee_id: str
    employee_name: str
    late_days: int
    total_late_minutes: int
    average_late_minutes: int
    deduction_amount: float
    breakdown: tuple[LateDayEntry, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "lateDays": self.late_days,
            "totalLateMinutes": self.total_late_minutes,
            "averageLateMinutes": self.average_late_minutes,
            "deductionAmount": self.deduction_amount,
            "breakdown": [b.to_dict() for b in self.breakdown],
        }


@dataclass(frozen=True)
class DayDeduction:
    late_minutes: int
    deduction: float

    def to_dict(self) -> dict[str, Any]:
        return {"lateMinutes": self.late_minutes, "deduction": self.deduction}


@dataclass(frozen=True)
class DeductionSummary:
    total_employees_with_deductions: int
    total_deduction_amount: float
    total_late_days: int
    average_deduction_per_employee: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalEmployeesWithDeductions": self.total_employees_with_deductions,
            "totalDeductionAmount": self.total_deduction_amount,
            "totalLateDays": self.total_late_days,
            "averageDeductionPerEmployee": self.average_deduction_per_employee,
        }
