from __future__ import annotations

from pydantic import BaseModel, Field


class SlippageTolerance(BaseModel):
    numerator: int = Field(..., ge=0, description="Slippage numerator (1 for 1/100).")
    denominator: int = Field(..., gt=0, description="Slippage denominator (100 for 1/100).")


class RemoveLiquidityQuoteRequest(BaseModel):
    position_address: str = Field(..., description="Position address, echoed back.")
    tick_current_index: int = Field(..., description="Pool current tick index.")
    sqrt_price: int = Field(..., description="Pool sqrt price in Q64.64.")
    tick_lower_index: int = Field(..., description="Position lower tick index.")
    tick_upper_index: int = Field(..., description="Position upper tick index.")
    liquidity: int = Field(..., description="Position liquidity.")
    slippage_tolerance: SlippageTolerance
    round_up: bool = Field(
        False,
        description="Round conversions up (deposit estimation) instead of down (withdrawal).",
    )


class RemoveLiquidityQuoteResponse(BaseModel):
    position_address: str
    position_status: str
    est_token_a: str
    est_token_b: str
    min_token_a: str
    min_token_b: str
    liquidity: str
