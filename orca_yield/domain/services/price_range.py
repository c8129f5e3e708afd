from __future__ import annotations

from decimal import Decimal

from orca_yield.domain.entities.yield_estimate import StrategyPriceRange
from orca_yield.domain.services.whirlpool_math import tick_index_to_price


def is_price_out_of_range(*, price_lower: Decimal, price_upper: Decimal, pool_price: Decimal) -> bool:
    return price_lower > pool_price or price_upper < pool_price


def get_strategy_price_range(
    *,
    tick_lower_index: int,
    tick_upper_index: int,
    token_decimals_a: int,
    token_decimals_b: int,
    pool_price: Decimal,
) -> StrategyPriceRange:
    price_lower = tick_index_to_price(tick_lower_index, token_decimals_a, token_decimals_b)
    price_upper = tick_index_to_price(tick_upper_index, token_decimals_a, token_decimals_b)
    return StrategyPriceRange(
        price_lower=price_lower,
        price_upper=price_upper,
        pool_price=pool_price,
        strategy_out_of_range=is_price_out_of_range(
            price_lower=price_lower,
            price_upper=price_upper,
            pool_price=pool_price,
        ),
    )
