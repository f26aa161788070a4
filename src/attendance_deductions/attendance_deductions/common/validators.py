from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ..core.enums import DeductionType
from ..core.exceptions import ValidationError
from ..settings.model import LateDeductionSettings


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} không hợp lệ")
    return value.strip()


def require_non_negative(value: Optional[float], field_name: str) -> None:
    if value is not None and value < 0:
        raise ValidationError(f"{field_name} không được âm")


def validate_deduction_settings(settings: LateDeductionSettings) -> LateDeductionSettings:
    """Reject inconsistent policies and return one with tiers sorted by min.

    Runs when a policy is saved, so evaluation can trust tier order.
    """

    if not isinstance(settings.deduction_type, DeductionType):
        raise ValidationError(f"Kiểu khấu trừ không hợp lệ: {settings.deduction_type!r}")

    require_non_negative(settings.late_threshold_minutes, "lateThresholdMinutes")
    require_non_negative(settings.fixed_deduction_amount, "fixedDeductionAmount")

    pct = settings.percentage_deduction
    if pct is not None and not 0 <= pct <= 100:
        raise ValidationError("percentageDeduction phải nằm trong khoảng 0-100")

    if settings.apply_after_days is not None and settings.apply_after_days < 1:
        raise ValidationError("applyAfterDays tối thiểu là 1")

    tiers = sorted(settings.scaled_deductions, key=lambda t: t.min_minutes)
    for tier in tiers:
        if tier.min_minutes < 0 or tier.max_minutes < 0:
            raise ValidationError("Khoảng phút không được âm")
        if tier.min_minutes > tier.max_minutes:
            raise ValidationError(f"Khoảng phút không hợp lệ: {tier.min_minutes}-{tier.max_minutes}")
        require_non_negative(tier.deduction_amount, "deductionAmount")

    for prev, cur in zip(tiers, tiers[1:]):
        if cur.min_minutes <= prev.max_minutes:
            raise ValidationError(
                f"Các khoảng phút bị chồng lấn: {prev.min_minutes}-{prev.max_minutes} và "
                f"{cur.min_minutes}-{cur.max_minutes}"
            )

    return replace(settings, scaled_deductions=tuple(tiers))
