from __future__ import annotations

from decimal import Decimal

from orca_yield.application.dto.liquidity_distribution import GetLiquidityDistributionInput
from orca_yield.application.ports.whirlpool_pool_port import WhirlpoolPoolPort
from orca_yield.domain.entities.liquidity_distribution import LiquidityDistribution, LiquidityForPrice
from orca_yield.domain.exceptions import LiquidityDistributionInputError, PoolDataNotFoundError


class GetLiquidityDistributionUseCase:
    def __init__(self, *, pool_port: WhirlpoolPoolPort):
        self._pool_port = pool_port

    def execute(self, command: GetLiquidityDistributionInput) -> LiquidityDistribution:
        pool = self._pool_port.get_pool(pool_address=command.pool_address)
        if pool is None:
            raise PoolDataNotFoundError(f"Could not get pool data for Whirlpool {command.pool_address}")

        # Looking up the initialized bounds walks every tick array; callers should pass them.
        lowest_tick = command.lowest_tick
        if lowest_tick is None:
            lowest_tick = self._pool_port.get_lowest_initialized_tick(
                pool_address=command.pool_address,
                tick_spacing=pool.tick_spacing,
            )
        highest_tick = command.highest_tick
        if highest_tick is None:
            highest_tick = self._pool_port.get_highest_initialized_tick(
                pool_address=command.pool_address,
                tick_spacing=pool.tick_spacing,
            )
        if lowest_tick > highest_tick:
            raise LiquidityDistributionInputError("lowest_tick must not exceed highest_tick.")

        datapoints = self._pool_port.get_liquidity_distribution(
            pool_address=command.pool_address,
            lowest_tick=lowest_tick,
            highest_tick=highest_tick,
        )

        distribution: list[LiquidityForPrice] = []
        for entry in datapoints:
            price = entry.price
            if not command.keep_order:
                if price <= 0:
                    raise LiquidityDistributionInputError("price must be positive to invert order.")
                price = Decimal("1") / price
            distribution.append(
                LiquidityForPrice(
                    price=price,
                    liquidity=entry.liquidity,
                    tick_index=entry.tick_index,
                )
            )

        return LiquidityDistribution(
            current_price=pool.price,
            current_tick_index=pool.tick_current_index,
            distribution=distribution,
        )
