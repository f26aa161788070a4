from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.constants import DAYS_PER_MONTH
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class PayrollRecord:
    """Bảng lương tháng của một nhân viên (chỉ các trường cần cho khấu trừ)."""

    employee_id: str
    base_salary: float
    employee_name: Optional[str] = None
    period: Optional[str] = None
    net_salary: Optional[float] = None

    @property
    def daily_salary(self) -> float:
        # Fixed 30-day month, not calendar-aware.
        return self.base_salary / DAYS_PER_MONTH

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PayrollRecord":
        raw_id = data.get("employeeId")
        employee_id = str(raw_id).strip() if raw_id is not None else ""
        if not employee_id:
            raise ValidationError("employeeId không hợp lệ")

        try:
            base_salary = float(data.get("baseSalary") or 0)
            net_salary = data.get("netSalary")
            net_salary = float(net_salary) if net_salary is not None else None
        except (TypeError, ValueError):
            raise ValidationError("Lương không hợp lệ")
        if base_salary < 0:
            raise ValidationError("Lương cơ bản không được âm")

        return cls(
            employee_id=employee_id,
            base_salary=base_salary,
            employee_name=data.get("employeeName"),
            period=data.get("period"),
            net_salary=net_salary,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "period": self.period,
            "baseSalary": self.base_salary,
            "netSalary": self.net_salary,
        }
