from __future__ import annotations

from ...settings.model import LateDeductionSettings
from .base import DeductionStrategy


class FixedDeductionStrategy(DeductionStrategy):
    """Same amount for every late day."""

    def amount(self, *, late_minutes: int, daily_salary: float, settings: LateDeductionSettings) -> float:
        return settings.fixed_deduction_amount or 0
