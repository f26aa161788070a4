from __future__ import annotations

from ...settings.model import LateDeductionSettings
from .base import DeductionStrategy


class PercentageDeductionStrategy(DeductionStrategy):
    """A percentage of the daily salary."""

    def amount(self, *, late_minutes: int, daily_salary: float, settings: LateDeductionSettings) -> float:
        percentage = settings.percentage_deduction or 0
        return daily_salary * percentage / 100
