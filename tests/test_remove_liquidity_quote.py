from __future__ import annotations

from dataclasses import replace

import pytest

from orca_yield.domain.entities.percentage import Percentage
from orca_yield.domain.entities.position import RemoveLiquidityQuoteParams
from orca_yield.domain.exceptions import (
    InvalidLiquidityError,
    InvalidRangeError,
    UnknownPositionStateError,
)
from orca_yield.domain.services.position_status import get_position_status
from orca_yield.domain.services.remove_liquidity_quote import get_remove_liquidity_quote
from orca_yield.domain.services.whirlpool_math import MAX_TICK_INDEX, tick_index_to_sqrt_price_x64


POSITION = "5xPositionAddress1111111111111111111111111111"


def _params(
    tick_current_index: int,
    *,
    liquidity: int = 1_000_000,
    slippage: Percentage | None = None,
    tick_lower_index: int = -100,
    tick_upper_index: int = 100,
) -> RemoveLiquidityQuoteParams:
    return RemoveLiquidityQuoteParams(
        position_address=POSITION,
        tick_current_index=tick_current_index,
        sqrt_price=tick_index_to_sqrt_price_x64(tick_current_index),
        tick_lower_index=tick_lower_index,
        tick_upper_index=tick_upper_index,
        liquidity=liquidity,
        slippage_tolerance=slippage or Percentage.from_fraction(1, 100),
    )


def test_position_status_boundaries():
    assert get_position_status(-101, -100, 100) == "BelowRange"
    assert get_position_status(-100, -100, 100) == "InRange"
    assert get_position_status(99, -100, 100) == "InRange"
    assert get_position_status(100, -100, 100) == "AboveRange"


def test_below_range_is_all_token_a():
    quote = get_remove_liquidity_quote(_params(-200))

    assert quote.est_token_b == 0
    assert quote.min_token_b == 0
    assert quote.est_token_a > 0
    assert quote.min_token_a == quote.est_token_a * 99 // 100


def test_above_range_is_all_token_b():
    quote = get_remove_liquidity_quote(_params(150))

    assert quote.est_token_a == 0
    assert quote.min_token_a == 0
    assert quote.est_token_b > 0
    assert quote.min_token_b == quote.est_token_b * 99 // 100


def test_below_and_above_range_are_symmetric_for_symmetric_bounds():
    below = get_remove_liquidity_quote(_params(-200))
    above = get_remove_liquidity_quote(_params(150))

    assert abs(below.est_token_a - above.est_token_b) <= 1


def test_in_range_yields_both_tokens():
    quote = get_remove_liquidity_quote(_params(0))

    assert quote.est_token_a > 0
    assert quote.est_token_b > 0
    assert quote.min_token_a == quote.est_token_a * 99 // 100
    assert quote.min_token_b == quote.est_token_b * 99 // 100


def test_current_tick_on_lower_bound_is_in_range_with_no_token_b():
    quote = get_remove_liquidity_quote(_params(-100))

    assert quote.est_token_a > 0
    assert quote.est_token_b == 0


def test_current_tick_on_upper_bound_is_above_range():
    quote = get_remove_liquidity_quote(_params(100))

    assert quote.est_token_a == 0
    assert quote.est_token_b > 0


def test_identifier_and_liquidity_are_echoed():
    quote = get_remove_liquidity_quote(_params(0, liquidity=42_000_000))

    assert quote.position_address == POSITION
    assert quote.liquidity == 42_000_000


def test_zero_liquidity_quotes_zero():
    quote = get_remove_liquidity_quote(_params(0, liquidity=0))

    assert (quote.est_token_a, quote.est_token_b, quote.min_token_a, quote.min_token_b) == (0, 0, 0, 0)


@pytest.mark.parametrize("tick_current_index", [-200, 0, 150])
def test_minimum_never_exceeds_estimate(tick_current_index: int):
    for round_up in (False, True):
        for numerator in (0, 1, 50, 100):
            quote = get_remove_liquidity_quote(
                _params(tick_current_index, slippage=Percentage.from_fraction(numerator, 100)),
                round_up=round_up,
            )
            assert quote.min_token_a <= quote.est_token_a
            assert quote.min_token_b <= quote.est_token_b


@pytest.mark.parametrize("tick_current_index", [-200, 0, 150])
def test_minimum_is_non_increasing_in_tolerance(tick_current_index: int):
    minimums = [
        get_remove_liquidity_quote(
            _params(tick_current_index, liquidity=987_654_321, slippage=Percentage.from_fraction(bps, 10_000))
        )
        for bps in (0, 1, 10, 50, 100, 500, 2_500, 10_000)
    ]
    for previous, current in zip(minimums, minimums[1:]):
        assert current.min_token_a <= previous.min_token_a
        assert current.min_token_b <= previous.min_token_b


@pytest.mark.parametrize("tick_current_index", [-200, 0, 150])
def test_round_up_never_lowers_estimate(tick_current_index: int):
    params = _params(tick_current_index, liquidity=123_456_789)
    down = get_remove_liquidity_quote(params, round_up=False)
    up = get_remove_liquidity_quote(params, round_up=True)

    assert up.est_token_a >= down.est_token_a
    assert up.est_token_b >= down.est_token_b


def test_quote_is_deterministic_and_leaves_params_untouched():
    params = _params(0, liquidity=555_555)
    snapshot = replace(params)

    first = get_remove_liquidity_quote(params)
    second = get_remove_liquidity_quote(params)

    assert first == second
    assert params == snapshot


@pytest.mark.parametrize(("lower", "upper"), [(100, 100), (100, -100)])
def test_rejects_inverted_or_empty_range(lower: int, upper: int):
    with pytest.raises(InvalidRangeError):
        get_remove_liquidity_quote(_params(0, tick_lower_index=lower, tick_upper_index=upper))


def test_rejects_tick_outside_supported_bounds():
    with pytest.raises(InvalidRangeError):
        get_remove_liquidity_quote(_params(0, tick_upper_index=MAX_TICK_INDEX + 1))


def test_rejects_negative_liquidity():
    with pytest.raises(InvalidLiquidityError):
        get_remove_liquidity_quote(_params(0, liquidity=-1))


def test_unknown_position_state_is_rejected(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(
        "orca_yield.domain.services.remove_liquidity_quote.get_position_status",
        lambda *_args: "Sideways",
    )
    with pytest.raises(UnknownPositionStateError):
        get_remove_liquidity_quote(_params(0))


@pytest.mark.parametrize("sqrt_price", [0, -1])
def test_rejects_non_positive_sqrt_price(sqrt_price: int):
    params = replace(_params(0), sqrt_price=sqrt_price)
    with pytest.raises(InvalidRangeError):
        get_remove_liquidity_quote(params)
