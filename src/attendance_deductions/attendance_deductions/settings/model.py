from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Union

from ..core.constants import (
    DEFAULT_APPLY_AFTER_DAYS,
    DEFAULT_FIXED_DEDUCTION_AMOUNT,
    DEFAULT_LATE_THRESHOLD_MINUTES,
    DEFAULT_PERCENTAGE_DEDUCTION,
    DEFAULT_SCALED_TIERS,
)
from ..core.enums import DeductionType
from ..core.exceptions import ValidationError


def _as_float(value: Any, field_name: str) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} không hợp lệ")


def _as_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} phải là true/false")
    return value


def _as_int(value: Any, field_name: str) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} không hợp lệ")


@dataclass(frozen=True)
class ScaledDeduction:
    """One tier of a scaled schedule: lateness in [min, max] costs deduction_amount."""

    min_minutes: int
    max_minutes: int
    deduction_amount: float

    def matches(self, late_minutes: int) -> bool:
        return self.min_minutes <= late_minutes <= self.max_minutes

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScaledDeduction":
        minutes_range = data.get("minutesRange") if isinstance(data, dict) else None
        if not isinstance(minutes_range, dict):
            raise ValidationError("scaledDeductions không hợp lệ")
        return cls(
            min_minutes=_as_int(minutes_range.get("min"), "minutesRange.min") or 0,
            max_minutes=_as_int(minutes_range.get("max"), "minutesRange.max") or 0,
            deduction_amount=_as_float(data.get("deductionAmount"), "deductionAmount") or 0,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "minutesRange": {"min": self.min_minutes, "max": self.max_minutes},
            "deductionAmount": self.deduction_amount,
        }


def default_scaled_deductions() -> tuple[ScaledDeduction, ...]:
    return tuple(
        ScaledDeduction(min_minutes=lo, max_minutes=hi, deduction_amount=amount)
        for lo, hi, amount in DEFAULT_SCALED_TIERS
    )


def _as_deduction_type(value: Any) -> Union[DeductionType, str]:
    if isinstance(value, DeductionType):
        return value
    raw = str(value or "").strip().lower()
    try:
        return DeductionType(raw)
    except ValueError:
        # Unknown types stay as-is; they deduct nothing.
        return raw


@dataclass(frozen=True)
class LateDeductionSettings:
    """Cấu hình khấu trừ lương do đi muộn (một bản ghi đang hiệu lực)."""

    enabled: bool = False
    late_threshold_minutes: int = DEFAULT_LATE_THRESHOLD_MINUTES
    deduction_type: Union[DeductionType, str] = DeductionType.FIXED
    fixed_deduction_amount: Optional[float] = DEFAULT_FIXED_DEDUCTION_AMOUNT
    percentage_deduction: Optional[float] = DEFAULT_PERCENTAGE_DEDUCTION
    scaled_deductions: tuple[ScaledDeduction, ...] = field(default_factory=default_scaled_deductions)
    apply_after_days: Optional[int] = DEFAULT_APPLY_AFTER_DAYS
    exclude_weekends: bool = True
    exclude_employee_ids: frozenset[str] = frozenset()
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "LateDeductionSettings":
        """Build settings from the camelCase JSON shape, merged over defaults."""

        defaults = cls()
        data = data or {}

        def pick(key: str, current: Any) -> Any:
            return data[key] if key in data else current

        if "scaledDeductions" in data:
            scaled = tuple(ScaledDeduction.from_dict(item) for item in (data["scaledDeductions"] or []))
        else:
            scaled = defaults.scaled_deductions

        excluded: Iterable[Any] = pick("excludeEmployeeIds", None) or []
        if isinstance(excluded, str):
            excluded = [excluded]
        elif not isinstance(excluded, (list, tuple, set, frozenset)):
            raise ValidationError("excludeEmployeeIds phải là danh sách")

        return cls(
            enabled=_as_bool(pick("enabled", defaults.enabled), "enabled"),
            late_threshold_minutes=_as_int(
                pick("lateThresholdMinutes", defaults.late_threshold_minutes), "lateThresholdMinutes"
            )
            or 0,
            deduction_type=_as_deduction_type(pick("deductionType", defaults.deduction_type.value)),
            fixed_deduction_amount=_as_float(
                pick("fixedDeductionAmount", defaults.fixed_deduction_amount), "fixedDeductionAmount"
            ),
            percentage_deduction=_as_float(
                pick("percentageDeduction", defaults.percentage_deduction), "percentageDeduction"
            ),
            scaled_deductions=scaled,
            apply_after_days=_as_int(pick("applyAfterDays", defaults.apply_after_days), "applyAfterDays"),
            exclude_weekends=_as_bool(pick("excludeWeekends", defaults.exclude_weekends), "excludeWeekends"),
            exclude_employee_ids=frozenset(str(x) for x in excluded),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )

    def to_dict(self) -> dict[str, Any]:
        deduction_type = (
            self.deduction_type.value if isinstance(self.deduction_type, DeductionType) else self.deduction_type
        )
        return {
            "enabled": self.enabled,
            "lateThresholdMinutes": self.late_threshold_minutes,
            "deductionType": deduction_type,
            "fixedDeductionAmount": self.fixed_deduction_amount,
            "percentageDeduction": self.percentage_deduction,
            "scaledDeductions": [s.to_dict() for s in self.scaled_deductions],
            "applyAfterDays": self.apply_after_days,
            "excludeWeekends": self.exclude_weekends,
            "excludeEmployeeIds": sorted(self.exclude_employee_ids),
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
