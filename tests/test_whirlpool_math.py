from __future__ import annotations

from decimal import Decimal

import pytest

from orca_yield.domain.services.whirlpool_math import (
    MAX_TICK_INDEX,
    MIN_TICK_INDEX,
    Q64,
    get_nearest_valid_tick_index,
    get_token_a_from_liquidity,
    get_token_b_from_liquidity,
    price_to_tick_index,
    sqrt_price_x64_to_price,
    tick_index_to_price,
    tick_index_to_sqrt_price_x64,
)


def test_tick_zero_maps_to_one_in_q64():
    assert tick_index_to_sqrt_price_x64(0) == Q64


@pytest.mark.parametrize("tick", [-50000, -1000, -100, -1, 1, 100, 1000, 50000])
def test_sqrt_price_matches_closed_form(tick: int):
    sqrt_price = tick_index_to_sqrt_price_x64(tick)
    assert sqrt_price / Q64 == pytest.approx(1.0001 ** (tick / 2), rel=1e-12)


def test_sqrt_price_is_strictly_increasing():
    ticks = [MIN_TICK_INDEX, -100000, -64, -1, 0, 1, 64, 100000, MAX_TICK_INDEX]
    values = [tick_index_to_sqrt_price_x64(tick) for tick in ticks]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


@pytest.mark.parametrize("tick", [MIN_TICK_INDEX - 1, MAX_TICK_INDEX + 1])
def test_sqrt_price_rejects_out_of_bounds_tick(tick: int):
    with pytest.raises(ValueError):
        tick_index_to_sqrt_price_x64(tick)


def test_token_a_from_liquidity_exact_values():
    # L * (1/sqrt(1) - 1/sqrt(4)) = 10 * 0.5
    assert get_token_a_from_liquidity(10, Q64, 2 * Q64, False) == 5
    assert get_token_a_from_liquidity(3, Q64, 2 * Q64, False) == 1
    assert get_token_a_from_liquidity(3, Q64, 2 * Q64, True) == 2


def test_token_b_from_liquidity_exact_values():
    assert get_token_b_from_liquidity(10, Q64, 3 * Q64, False) == 20
    assert get_token_b_from_liquidity(3, Q64, Q64 + 1, False) == 0
    assert get_token_b_from_liquidity(3, Q64, Q64 + 1, True) == 1


def test_token_conversions_ignore_bound_order():
    lower = tick_index_to_sqrt_price_x64(-100)
    upper = tick_index_to_sqrt_price_x64(100)
    assert get_token_a_from_liquidity(1_000_000, lower, upper, False) == get_token_a_from_liquidity(
        1_000_000, upper, lower, False
    )
    assert get_token_b_from_liquidity(1_000_000, lower, upper, True) == get_token_b_from_liquidity(
        1_000_000, upper, lower, True
    )


def test_token_conversions_round_up_by_at_most_one():
    lower = tick_index_to_sqrt_price_x64(-300)
    upper = tick_index_to_sqrt_price_x64(700)
    for liquidity in (1, 999, 1_000_000, 123_456_789_012_345):
        down_a = get_token_a_from_liquidity(liquidity, lower, upper, False)
        up_a = get_token_a_from_liquidity(liquidity, lower, upper, True)
        down_b = get_token_b_from_liquidity(liquidity, lower, upper, False)
        up_b = get_token_b_from_liquidity(liquidity, lower, upper, True)
        assert 0 <= up_a - down_a <= 1
        assert 0 <= up_b - down_b <= 1


def test_tick_index_to_price_applies_decimals():
    assert tick_index_to_price(0, 6, 6) == Decimal("1")
    assert tick_index_to_price(0, 9, 6) == Decimal("1000")
    assert tick_index_to_price(1, 6, 6) == Decimal("1.0001")


def test_price_to_tick_index_floors_and_round_trips():
    assert price_to_tick_index(Decimal("1"), 6, 6) == 0
    assert price_to_tick_index(Decimal("1.00015"), 6, 6) == 1
    assert price_to_tick_index(Decimal("0.99"), 6, 6) == -101
    assert price_to_tick_index(tick_index_to_price(100, 9, 6), 9, 6) == 100
    assert price_to_tick_index(tick_index_to_price(-100, 9, 6), 9, 6) == -100


def test_price_to_tick_index_rejects_non_positive_price():
    with pytest.raises(ValueError):
        price_to_tick_index(Decimal("0"), 6, 6)


def test_nearest_valid_tick_truncates_toward_zero():
    assert get_nearest_valid_tick_index(128, 64) == 128
    assert get_nearest_valid_tick_index(130, 64) == 128
    assert get_nearest_valid_tick_index(-105, 64) == -64
    assert get_nearest_valid_tick_index(-101, 1) == -101


def test_sqrt_price_x64_to_price():
    assert sqrt_price_x64_to_price(Q64, 9, 6) == Decimal("1000")
    assert sqrt_price_x64_to_price(2 * Q64, 6, 6) == Decimal("4")
    with pytest.raises(ValueError):
        sqrt_price_x64_to_price(0, 6, 6)
