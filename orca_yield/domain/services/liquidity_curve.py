from __future__ import annotations

from orca_yield.domain.entities.liquidity_distribution import InitializedTick, LiquidityDataPoint
from orca_yield.domain.services.whirlpool_math import tick_index_to_price


def build_liquidity_datapoints(
    initialized_ticks: list[InitializedTick],
    *,
    lowest_tick: int,
    highest_tick: int,
    token_decimals_a: int,
    token_decimals_b: int,
) -> list[LiquidityDataPoint]:
    """Active liquidity after crossing each initialized tick in ``[lowest_tick, highest_tick]``.

    Ticks below ``lowest_tick`` still feed the running total.
    """
    datapoints: list[LiquidityDataPoint] = []
    running = 0
    for tick in sorted(initialized_ticks, key=lambda row: row.tick_index):
        if tick.tick_index > highest_tick:
            break
        running += tick.liquidity_net
        if tick.tick_index < lowest_tick:
            continue
        datapoints.append(
            LiquidityDataPoint(
                tick_index=tick.tick_index,
                price=tick_index_to_price(tick.tick_index, token_decimals_a, token_decimals_b),
                liquidity=running,
            )
        )
    return datapoints
