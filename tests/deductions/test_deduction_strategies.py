import pytest

from src.attendance_deductions.attendance_deductions.core.enums import DeductionType
from src.attendance_deductions.attendance_deductions.deductions.calculator import calculate_deduction
from src.attendance_deductions.attendance_deductions.deductions.factory import DeductionStrategyFactory
from src.attendance_deductions.attendance_deductions.deductions.strategies.fixed_strategy import FixedDeductionStrategy
from src.attendance_deductions.attendance_deductions.deductions.strategies.none_strategy import NoDeductionStrategy
from src.attendance_deductions.attendance_deductions.deductions.strategies.percentage_strategy import (
    PercentageDeductionStrategy,
)
from src.attendance_deductions.attendance_deductions.deductions.strategies.scaled_strategy import ScaledDeductionStrategy
from src.attendance_deductions.attendance_deductions.settings.model import LateDeductionSettings, ScaledDeduction


def _settings(**overrides) -> LateDeductionSettings:
    base = {"enabled": True, "late_threshold_minutes": 15}
    base.update(overrides)
    return LateDeductionSettings(**base)


@pytest.mark.parametrize(
    "deduction_type, expected",
    [
        (DeductionType.FIXED, FixedDeductionStrategy),
        (DeductionType.PERCENTAGE, PercentageDeductionStrategy),
        (DeductionType.SCALED, ScaledDeductionStrategy),
        ("scaled", ScaledDeductionStrategy),
        ("hourly", NoDeductionStrategy),
    ],
)
def test_factory_picks_strategy_by_type(deduction_type, expected):
    strategy = DeductionStrategyFactory().for_settings(_settings(deduction_type=deduction_type))
    assert isinstance(strategy, expected)


def test_disabled_policy_deducts_nothing():
    assert calculate_deduction(60, 1000, _settings(enabled=False)) == 0


def test_below_threshold_deducts_nothing():
    assert calculate_deduction(14, 1000, _settings()) == 0
    assert calculate_deduction(15, 1000, _settings()) == 50


def test_fixed_amount_and_unset_amount():
    assert calculate_deduction(20, 1000, _settings(fixed_deduction_amount=75)) == 75
    assert calculate_deduction(20, 1000, _settings(fixed_deduction_amount=None)) == 0


def test_percentage_of_daily_salary():
    settings = _settings(deduction_type=DeductionType.PERCENTAGE, percentage_deduction=2)
    assert calculate_deduction(20, 1000, settings) == pytest.approx(20)
    assert calculate_deduction(20, 0, settings) == 0


def test_percentage_unset_is_zero():
    settings = _settings(deduction_type=DeductionType.PERCENTAGE, percentage_deduction=None)
    assert calculate_deduction(20, 1000, settings) == 0


@pytest.mark.parametrize(
    "late_minutes, expected",
    [
        (15, 30),
        (30, 30),
        (31, 60),
        (90, 100),
        (500, 150),
        (999, 150),
        (2000, 150),
    ],
)
def test_scaled_default_tiers(late_minutes, expected):
    settings = _settings(deduction_type=DeductionType.SCALED)
    assert calculate_deduction(late_minutes, 0, settings) == expected


def test_scaled_first_match_wins_on_overlap():
    tiers = (
        ScaledDeduction(min_minutes=15, max_minutes=60, deduction_amount=10),
        ScaledDeduction(min_minutes=30, max_minutes=90, deduction_amount=99),
    )
    settings = _settings(deduction_type=DeductionType.SCALED, scaled_deductions=tiers)
    assert calculate_deduction(45, 0, settings) == 10


def test_scaled_gap_falls_back_to_last_tier():
    tiers = (
        ScaledDeduction(min_minutes=15, max_minutes=20, deduction_amount=10),
        ScaledDeduction(min_minutes=40, max_minutes=60, deduction_amount=40),
    )
    settings = _settings(deduction_type=DeductionType.SCALED, scaled_deductions=tiers)
    assert calculate_deduction(30, 0, settings) == 40


def test_scaled_empty_list_is_zero():
    settings = _settings(deduction_type=DeductionType.SCALED, scaled_deductions=())
    assert calculate_deduction(500, 1000, settings) == 0


def test_unknown_type_is_zero():
    assert calculate_deduction(500, 1000, _settings(deduction_type="hourly")) == 0
