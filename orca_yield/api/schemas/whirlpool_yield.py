from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from orca_yield.api.schemas.whirlpool_state import (
    InitializedTickState,
    WhirlpoolPoolState,
    WhirlpoolPositionState,
)


class PositionAprApyRequest(BaseModel):
    pool: WhirlpoolPoolState
    price_lower: Decimal = Field(..., description="Lower bound of the price range.")
    price_upper: Decimal = Field(..., description="Upper bound of the price range.")
    spot_prices: dict[str, Decimal] | None = Field(
        None,
        description="USD price by mint. Looked up when omitted.",
    )


class StrategyState(BaseModel):
    address: str
    token_a_collateral_id: int
    token_b_collateral_id: int
    token_a_decimals: int = Field(..., ge=0)
    token_b_decimals: int = Field(..., ge=0)
    reward_collateral_ids: list[int] = Field(default_factory=lambda: [0, 0, 0], min_length=3, max_length=3)
    reward_decimals: list[int] = Field(
        default_factory=lambda: [0, 0, 0],
        min_length=3,
        max_length=3,
        description="Zero marks an unused reward slot.",
    )


class StrategyAprApyRequest(BaseModel):
    strategy: StrategyState
    position: WhirlpoolPositionState
    pool: WhirlpoolPoolState
    collateral_mints: list[str] = Field(..., description="Token mint per collateral id.")
    spot_prices: dict[str, Decimal] = Field(..., description="USD price by mint.")


class WhirlpoolAprApyResponse(BaseModel):
    total_apr: str
    total_apy: str
    fee_apr: str
    fee_apy: str
    rewards_apr: list[str]
    rewards_apy: list[str]
    price_lower: str
    price_upper: str
    pool_price: str
    strategy_out_of_range: bool


class LiquidityDistributionRequest(BaseModel):
    pool: WhirlpoolPoolState
    initialized_ticks: list[InitializedTickState] = Field(default_factory=list)
    keep_order: bool = Field(True, description="False inverts prices to token A per token B.")
    lowest_tick: int | None = None
    highest_tick: int | None = None


class LiquidityForPriceResponse(BaseModel):
    price: str
    liquidity: str
    tick_index: int


class LiquidityDistributionResponse(BaseModel):
    current_price: str
    current_tick_index: int
    distribution: list[LiquidityForPriceResponse]


class PoolInfoRequest(BaseModel):
    pool: WhirlpoolPoolState
    positions_count: int = Field(0, ge=0, description="Open positions known for the pool.")


class GenericPoolInfoResponse(BaseModel):
    dex: str
    address: str
    token_mint_a: str
    token_mint_b: str
    price: str
    fee_rate: str
    volume_on_last_7d: str | None
    tvl: str | None
    tick_spacing: str
    positions: str
