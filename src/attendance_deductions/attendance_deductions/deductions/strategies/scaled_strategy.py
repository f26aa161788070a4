from __future__ import annotations

from ...settings.model import LateDeductionSettings
from .base import DeductionStrategy


class ScaledDeductionStrategy(DeductionStrategy):
    """Tiered by lateness: first matching tier wins, beyond all tiers the last one applies."""

    def amount(self, *, late_minutes: int, daily_salary: float, settings: LateDeductionSettings) -> float:
        tiers = settings.scaled_deductions
        if not tiers:
            return 0

        for tier in tiers:
            if tier.matches(late_minutes):
                return tier.deduction_amount

        return tiers[-1].deduction_amount or 0
