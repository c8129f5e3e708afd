from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from orca_yield.domain.entities.percentage import Percentage


PositionStatus = Literal["BelowRange", "InRange", "AboveRange"]

BELOW_RANGE: PositionStatus = "BelowRange"
IN_RANGE: PositionStatus = "InRange"
ABOVE_RANGE: PositionStatus = "AboveRange"


@dataclass(frozen=True)
class WhirlpoolPosition:
    address: str
    whirlpool: str
    tick_lower_index: int
    tick_upper_index: int
    liquidity: int


@dataclass(frozen=True)
class RemoveLiquidityQuoteParams:
    position_address: str
    tick_current_index: int
    sqrt_price: int
    tick_lower_index: int
    tick_upper_index: int
    liquidity: int
    slippage_tolerance: Percentage


@dataclass(frozen=True)
class RemoveLiquidityQuote:
    position_address: str
    est_token_a: int
    est_token_b: int
    min_token_a: int
    min_token_b: int
    liquidity: int
