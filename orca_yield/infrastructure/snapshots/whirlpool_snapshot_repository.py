from __future__ import annotations

from orca_yield.domain.entities.liquidity_distribution import InitializedTick, LiquidityDataPoint
from orca_yield.domain.entities.position import WhirlpoolPosition
from orca_yield.domain.entities.whirlpool import WhirlpoolPoolData
from orca_yield.domain.services.liquidity_curve import build_liquidity_datapoints
from orca_yield.domain.services.whirlpool_math import (
    MAX_TICK_INDEX,
    MIN_TICK_INDEX,
    get_nearest_valid_tick_index,
)


class WhirlpoolSnapshotRepository:
    """Pool and position ports backed by account state the caller already read."""

    def __init__(
        self,
        *,
        pool: WhirlpoolPoolData,
        positions: list[WhirlpoolPosition] | None = None,
        initialized_ticks: list[InitializedTick] | None = None,
        positions_count: int = 0,
    ):
        self._pool = pool
        self._positions = {position.address: position for position in positions or []}
        self._initialized_ticks = list(initialized_ticks or [])
        self._positions_count = positions_count

    def get_pool(self, *, pool_address: str) -> WhirlpoolPoolData | None:
        if pool_address != self._pool.address:
            return None
        return self._pool

    def get_position(self, *, position_address: str) -> WhirlpoolPosition | None:
        return self._positions.get(position_address)

    def get_lowest_initialized_tick(self, *, pool_address: str, tick_spacing: int) -> int:
        if not self._initialized_ticks:
            return get_nearest_valid_tick_index(MIN_TICK_INDEX, tick_spacing)
        return min(tick.tick_index for tick in self._initialized_ticks)

    def get_highest_initialized_tick(self, *, pool_address: str, tick_spacing: int) -> int:
        if not self._initialized_ticks:
            return get_nearest_valid_tick_index(MAX_TICK_INDEX, tick_spacing)
        return max(tick.tick_index for tick in self._initialized_ticks)

    def get_liquidity_distribution(
        self,
        *,
        pool_address: str,
        lowest_tick: int,
        highest_tick: int,
    ) -> list[LiquidityDataPoint]:
        return build_liquidity_datapoints(
            self._initialized_ticks,
            lowest_tick=lowest_tick,
            highest_tick=highest_tick,
            token_decimals_a=self._pool.token_decimals_a,
            token_decimals_b=self._pool.token_decimals_b,
        )

    def count_positions(self, *, pool_address: str) -> int:
        return self._positions_count
