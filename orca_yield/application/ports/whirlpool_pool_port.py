from __future__ import annotations

from typing import Protocol

from orca_yield.domain.entities.liquidity_distribution import LiquidityDataPoint
from orca_yield.domain.entities.whirlpool import WhirlpoolPoolData


class WhirlpoolPoolPort(Protocol):
    def get_pool(self, *, pool_address: str) -> WhirlpoolPoolData | None:
        ...

    def get_lowest_initialized_tick(self, *, pool_address: str, tick_spacing: int) -> int:
        ...

    def get_highest_initialized_tick(self, *, pool_address: str, tick_spacing: int) -> int:
        ...

    def get_liquidity_distribution(
        self,
        *,
        pool_address: str,
        lowest_tick: int,
        highest_tick: int,
    ) -> list[LiquidityDataPoint]:
        ...

    def count_positions(self, *, pool_address: str) -> int:
        ...
