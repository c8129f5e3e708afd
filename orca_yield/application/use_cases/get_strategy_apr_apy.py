from __future__ import annotations

import logging
from decimal import Decimal

from orca_yield.application.dto.whirlpool_apr_apy import GetStrategyAprApyInput
from orca_yield.application.ports.whirlpool_listing_port import WhirlpoolListingPort
from orca_yield.application.ports.whirlpool_pool_port import WhirlpoolPoolPort
from orca_yield.application.ports.whirlpool_position_port import WhirlpoolPositionPort
from orca_yield.application.use_cases.whirlpool_aprs import build_apr_apy, out_of_range_apr_apy
from orca_yield.application.use_cases.whirlpool_resolver import resolve_whirlpool
from orca_yield.domain.entities.whirlpool import CollateralInfo, WhirlpoolStrategy
from orca_yield.domain.entities.yield_estimate import WhirlpoolAprApy
from orca_yield.domain.exceptions import PositionNotFoundError, TokenPriceNotFoundError
from orca_yield.domain.services.apr_estimation import estimate_aprs_for_price_range
from orca_yield.domain.services.price_range import get_strategy_price_range


logger = logging.getLogger(__name__)


class GetStrategyAprApyUseCase:
    def __init__(
        self,
        *,
        pool_port: WhirlpoolPoolPort,
        position_port: WhirlpoolPositionPort,
        listing_port: WhirlpoolListingPort,
    ):
        self._pool_port = pool_port
        self._position_port = position_port
        self._listing_port = listing_port

    def execute(self, command: GetStrategyAprApyInput) -> WhirlpoolAprApy:
        strategy = command.strategy
        position = self._position_port.get_position(position_address=strategy.position)
        if position is None:
            raise PositionNotFoundError(f"Position {strategy.position} does not exist")

        pool, listing = resolve_whirlpool(
            pool_port=self._pool_port,
            listing_port=self._listing_port,
            pool_address=strategy.pool,
            whirlpools=command.whirlpools,
        )

        price_range = get_strategy_price_range(
            tick_lower_index=position.tick_lower_index,
            tick_upper_index=position.tick_upper_index,
            token_decimals_a=strategy.token_a_decimals,
            token_decimals_b=strategy.token_b_decimals,
            pool_price=pool.price,
        )
        if price_range.strategy_out_of_range:
            logger.info(
                "strategy_apr_apy: out_of_range strategy=%s pool=%s pool_price=%s",
                strategy.address,
                strategy.pool,
                pool.price,
            )
            return out_of_range_apr_apy(price_range)

        volume_24h_usd = (listing.volume.day if listing.volume else None) or Decimal("0")
        fees_24h_usd = Decimal(volume_24h_usd) * pool.fee_rate
        token_prices = _strategy_token_prices(strategy, command.spot_prices, command.collateral_infos)

        aprs = estimate_aprs_for_price_range(
            pool=pool,
            token_prices=token_prices,
            fees_24h_usd=fees_24h_usd,
            tick_lower_index=position.tick_lower_index,
            tick_upper_index=position.tick_upper_index,
        )
        return build_apr_apy(aprs, price_range)


def _strategy_token_prices(
    strategy: WhirlpoolStrategy,
    spot_prices: dict[str, Decimal],
    collateral_infos: list[CollateralInfo],
) -> dict[str, Decimal]:
    token_prices: dict[str, Decimal] = {
        strategy.token_a_mint: _collateral_price(strategy.token_a_collateral_id, spot_prices, collateral_infos),
        strategy.token_b_mint: _collateral_price(strategy.token_b_collateral_id, spot_prices, collateral_infos),
    }
    for collateral_id, decimals in zip(strategy.reward_collateral_ids, strategy.reward_decimals):
        # decimals == 0 marks an unused reward slot
        if decimals == 0:
            continue
        mint = _collateral_mint(collateral_id, collateral_infos)
        token_prices[mint] = _collateral_price(collateral_id, spot_prices, collateral_infos)
    return token_prices


def _collateral_mint(collateral_id: int, collateral_infos: list[CollateralInfo]) -> str:
    if collateral_id < 0 or collateral_id >= len(collateral_infos):
        raise TokenPriceNotFoundError(f"Unknown collateral id {collateral_id}")
    return collateral_infos[collateral_id].mint


def _collateral_price(
    collateral_id: int,
    spot_prices: dict[str, Decimal],
    collateral_infos: list[CollateralInfo],
) -> Decimal:
    mint = _collateral_mint(collateral_id, collateral_infos)
    price = spot_prices.get(mint)
    if price is None:
        raise TokenPriceNotFoundError(f"Could not get token {mint} price")
    return price
