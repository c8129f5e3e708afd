from __future__ import annotations

from orca_yield.domain.entities.percentage import Percentage


def adjust_for_slippage(amount: int, slippage_tolerance: Percentage, *, round_up: bool) -> int:
    """Reduce ``amount`` by the tolerance fraction.

    Floors when ``round_up`` is false and ceils otherwise; both stay at or below
    ``amount``.
    """
    numerator = amount * (slippage_tolerance.denominator - slippage_tolerance.numerator)
    denominator = slippage_tolerance.denominator
    if round_up:
        return -(-numerator // denominator)
    return numerator // denominator
