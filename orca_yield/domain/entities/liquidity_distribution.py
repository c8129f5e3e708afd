from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class LiquidityDataPoint:
    tick_index: int
    price: Decimal
    liquidity: int


@dataclass(frozen=True)
class LiquidityForPrice:
    price: Decimal
    liquidity: int
    tick_index: int


@dataclass(frozen=True)
class LiquidityDistribution:
    current_price: Decimal
    current_tick_index: int
    distribution: list[LiquidityForPrice]


@dataclass(frozen=True)
class InitializedTick:
    tick_index: int
    liquidity_net: int
