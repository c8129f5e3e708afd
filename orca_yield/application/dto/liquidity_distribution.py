from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GetLiquidityDistributionInput:
    pool_address: str
    keep_order: bool = True
    lowest_tick: int | None = None
    highest_tick: int | None = None
