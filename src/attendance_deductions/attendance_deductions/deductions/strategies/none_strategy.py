from __future__ import annotations

from ...settings.model import LateDeductionSettings
from .base import DeductionStrategy


class NoDeductionStrategy(DeductionStrategy):
    """Unknown deduction type: nothing is deducted."""

    def amount(self, *, late_minutes: int, daily_salary: float, settings: LateDeductionSettings) -> float:
        return 0
