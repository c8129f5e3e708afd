from __future__ import annotations

import logging
from decimal import Decimal

from orca_yield.application.dto.whirlpool_apr_apy import GetPositionAprApyInput
from orca_yield.application.ports.token_price_port import TokenPricePort
from orca_yield.application.ports.whirlpool_listing_port import WhirlpoolListingPort
from orca_yield.application.ports.whirlpool_pool_port import WhirlpoolPoolPort
from orca_yield.application.use_cases.whirlpool_aprs import build_apr_apy, out_of_range_apr_apy
from orca_yield.application.use_cases.whirlpool_resolver import resolve_whirlpool
from orca_yield.domain.entities.whirlpool import WhirlpoolPoolData
from orca_yield.domain.entities.yield_estimate import StrategyPriceRange, WhirlpoolAprApy
from orca_yield.domain.exceptions import InvalidRangeError, TokenPriceNotFoundError
from orca_yield.domain.services.apr_estimation import estimate_aprs_for_price_range
from orca_yield.domain.services.price_range import is_price_out_of_range
from orca_yield.domain.services.whirlpool_math import get_nearest_valid_tick_index, price_to_tick_index


logger = logging.getLogger(__name__)


class GetPositionAprApyUseCase:
    def __init__(
        self,
        *,
        pool_port: WhirlpoolPoolPort,
        listing_port: WhirlpoolListingPort,
        price_port: TokenPricePort,
    ):
        self._pool_port = pool_port
        self._listing_port = listing_port
        self._price_port = price_port

    def execute(self, command: GetPositionAprApyInput) -> WhirlpoolAprApy:
        if command.price_lower <= 0 or command.price_upper <= 0:
            raise InvalidRangeError("price_lower and price_upper must be positive.")
        if command.price_lower >= command.price_upper:
            raise InvalidRangeError("price_lower must be lower than price_upper.")

        pool, listing = resolve_whirlpool(
            pool_port=self._pool_port,
            listing_port=self._listing_port,
            pool_address=command.pool_address,
            whirlpools=command.whirlpools,
        )

        price_range = StrategyPriceRange(
            price_lower=command.price_lower,
            price_upper=command.price_upper,
            pool_price=pool.price,
            strategy_out_of_range=is_price_out_of_range(
                price_lower=command.price_lower,
                price_upper=command.price_upper,
                pool_price=pool.price,
            ),
        )
        if price_range.strategy_out_of_range:
            return out_of_range_apr_apy(price_range)

        volume_24h_usd = (listing.volume.day if listing.volume else None) or Decimal("0")
        fees_24h_usd = Decimal(volume_24h_usd) * pool.fee_rate
        token_prices = self._pool_token_prices(pool, command.spot_prices)

        tick_lower_index = get_nearest_valid_tick_index(
            price_to_tick_index(command.price_lower, pool.token_decimals_a, pool.token_decimals_b),
            listing.tick_spacing,
        )
        tick_upper_index = get_nearest_valid_tick_index(
            price_to_tick_index(command.price_upper, pool.token_decimals_a, pool.token_decimals_b),
            listing.tick_spacing,
        )
        logger.info(
            "position_apr_apy: estimate pool=%s tick_lower=%s tick_upper=%s fees_24h_usd=%s",
            command.pool_address,
            tick_lower_index,
            tick_upper_index,
            fees_24h_usd,
        )

        aprs = estimate_aprs_for_price_range(
            pool=pool,
            token_prices=token_prices,
            fees_24h_usd=fees_24h_usd,
            tick_lower_index=tick_lower_index,
            tick_upper_index=tick_upper_index,
        )
        return build_apr_apy(aprs, price_range)

    def _pool_token_prices(
        self,
        pool: WhirlpoolPoolData,
        spot_prices: dict[str, Decimal] | None,
    ) -> dict[str, Decimal]:
        mints = [pool.token_mint_a, pool.token_mint_b]
        mints.extend(reward.mint for reward in pool.rewards if reward.mint)
        if spot_prices is None:
            spot_prices = self._price_port.get_prices(mints=mints)

        token_prices: dict[str, Decimal] = {}
        for mint in mints:
            price = spot_prices.get(mint)
            if not price:
                raise TokenPriceNotFoundError(f"Could not get token {mint} price")
            token_prices[mint] = price
        return token_prices
