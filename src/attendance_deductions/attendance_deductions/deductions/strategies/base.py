from __future__ import annotations

from abc import ABC, abstractmethod

from ...settings.model import LateDeductionSettings


class DeductionStrategy(ABC):
    """Strategy Pattern: how much one qualifying late day costs."""

    @abstractmethod
    def amount(self, *, late_minutes: int, daily_salary: float, settings: LateDeductionSettings) -> float:
        raise NotImplementedError
