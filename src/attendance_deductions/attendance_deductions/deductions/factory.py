from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import DeductionType
from ..settings.model import LateDeductionSettings
from .strategies.base import DeductionStrategy
from .strategies.fixed_strategy import FixedDeductionStrategy
from .strategies.none_strategy import NoDeductionStrategy
from .strategies.percentage_strategy import PercentageDeductionStrategy
from .strategies.scaled_strategy import ScaledDeductionStrategy


@dataclass
class DeductionStrategyFactory:
    """Factory Pattern: choose the deduction formula configured in the policy."""

    def for_settings(self, settings: LateDeductionSettings) -> DeductionStrategy:
        deduction_type = settings.deduction_type
        if deduction_type == DeductionType.FIXED:
            return FixedDeductionStrategy()
        if deduction_type == DeductionType.PERCENTAGE:
            return PercentageDeductionStrategy()
        if deduction_type == DeductionType.SCALED:
            return ScaledDeductionStrategy()
        return NoDeductionStrategy()
