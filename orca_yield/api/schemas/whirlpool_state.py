from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field


class WhirlpoolRewardState(BaseModel):
    mint: str = Field(..., description="Reward token mint; empty for an unused slot.")
    emissions_per_second: Decimal = Field(..., ge=0, description="Reward emissions per second in UI units.")


class WhirlpoolPoolState(BaseModel):
    address: str
    token_mint_a: str
    token_mint_b: str
    token_decimals_a: int = Field(..., ge=0)
    token_decimals_b: int = Field(..., ge=0)
    sqrt_price: int = Field(..., gt=0, description="Pool sqrt price in Q64.64.")
    tick_current_index: int
    tick_spacing: int = Field(..., gt=0)
    fee_rate: Decimal = Field(..., ge=0, description="Fee rate as a fraction (0.003 for 0.3%).")
    liquidity: int = Field(..., ge=0, description="Pool active liquidity.")
    price: Decimal | None = Field(
        None,
        gt=0,
        description="Token B per token A. Derived from sqrt_price when omitted.",
    )
    rewards: list[WhirlpoolRewardState] = Field(default_factory=list, max_length=3)


class WhirlpoolPositionState(BaseModel):
    address: str
    tick_lower_index: int
    tick_upper_index: int
    liquidity: int = Field(..., ge=0)


class InitializedTickState(BaseModel):
    tick_index: int
    liquidity_net: int
