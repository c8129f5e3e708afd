from __future__ import annotations

from decimal import Decimal

import pytest

from orca_yield.domain.entities.percentage import Percentage
from orca_yield.domain.exceptions import InvalidSlippageToleranceError
from orca_yield.domain.services.slippage import adjust_for_slippage


def test_adjust_for_slippage_floors_by_default_direction():
    one_percent = Percentage.from_fraction(1, 100)
    assert adjust_for_slippage(1000, one_percent, round_up=False) == 990
    assert adjust_for_slippage(999, one_percent, round_up=False) == 989


def test_adjust_for_slippage_round_up_stays_below_amount():
    one_percent = Percentage.from_fraction(1, 100)
    assert adjust_for_slippage(999, one_percent, round_up=True) == 990
    assert adjust_for_slippage(1, one_percent, round_up=True) == 1


def test_zero_and_full_tolerance():
    assert adjust_for_slippage(12345, Percentage.from_fraction(0, 100), round_up=False) == 12345
    assert adjust_for_slippage(12345, Percentage.from_fraction(1, 1), round_up=True) == 0


def test_percentage_from_decimal():
    assert Percentage.from_decimal(Decimal("0.01")) == Percentage(numerator=1, denominator=100)
    assert Percentage.from_decimal(Decimal("0.005")).to_decimal() == Decimal("0.005")


@pytest.mark.parametrize(
    ("numerator", "denominator"),
    [(1, 0), (-1, 100), (101, 100)],
)
def test_percentage_rejects_invalid_fraction(numerator: int, denominator: int):
    with pytest.raises(InvalidSlippageToleranceError):
        Percentage.from_fraction(numerator, denominator)
