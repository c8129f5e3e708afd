from __future__ import annotations

from orca_yield.api.schemas.whirlpool_state import (
    InitializedTickState,
    WhirlpoolPoolState,
    WhirlpoolPositionState,
)
from orca_yield.domain.entities.liquidity_distribution import InitializedTick
from orca_yield.domain.entities.position import WhirlpoolPosition
from orca_yield.domain.entities.whirlpool import WhirlpoolPoolData, WhirlpoolReward
from orca_yield.domain.services.whirlpool_math import sqrt_price_x64_to_price


def to_pool_data(state: WhirlpoolPoolState) -> WhirlpoolPoolData:
    price = state.price
    if price is None:
        price = sqrt_price_x64_to_price(state.sqrt_price, state.token_decimals_a, state.token_decimals_b)
    return WhirlpoolPoolData(
        address=state.address,
        token_mint_a=state.token_mint_a,
        token_mint_b=state.token_mint_b,
        token_decimals_a=state.token_decimals_a,
        token_decimals_b=state.token_decimals_b,
        price=price,
        sqrt_price=state.sqrt_price,
        tick_current_index=state.tick_current_index,
        tick_spacing=state.tick_spacing,
        fee_rate=state.fee_rate,
        liquidity=state.liquidity,
        rewards=[
            WhirlpoolReward(mint=reward.mint, emissions_per_second=reward.emissions_per_second)
            for reward in state.rewards
        ],
    )


def to_position(state: WhirlpoolPositionState, *, pool_address: str) -> WhirlpoolPosition:
    return WhirlpoolPosition(
        address=state.address,
        whirlpool=pool_address,
        tick_lower_index=state.tick_lower_index,
        tick_upper_index=state.tick_upper_index,
        liquidity=state.liquidity,
    )


def to_initialized_ticks(rows: list[InitializedTickState]) -> list[InitializedTick]:
    return [InitializedTick(tick_index=row.tick_index, liquidity_net=row.liquidity_net) for row in rows]
