from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class EstimatedAprs:
    fee: Decimal
    rewards: list[Decimal]


@dataclass(frozen=True)
class StrategyPriceRange:
    price_lower: Decimal
    price_upper: Decimal
    pool_price: Decimal
    strategy_out_of_range: bool


@dataclass(frozen=True)
class WhirlpoolAprApy:
    total_apr: Decimal
    total_apy: Decimal
    fee_apr: Decimal
    fee_apy: Decimal
    rewards_apr: list[Decimal]
    rewards_apy: list[Decimal]
    price_lower: Decimal
    price_upper: Decimal
    pool_price: Decimal
    strategy_out_of_range: bool
