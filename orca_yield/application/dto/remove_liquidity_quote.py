from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GetRemoveLiquidityQuoteInput:
    position_address: str
    tick_current_index: int
    sqrt_price: int
    tick_lower_index: int
    tick_upper_index: int
    liquidity: int
    slippage_numerator: int
    slippage_denominator: int
    round_up: bool


@dataclass(frozen=True)
class GetRemoveLiquidityQuoteOutput:
    position_address: str
    position_status: str
    est_token_a: int
    est_token_b: int
    min_token_a: int
    min_token_b: int
    liquidity: int
