from __future__ import annotations

from decimal import Decimal

from orca_yield.domain.entities.yield_estimate import EstimatedAprs, StrategyPriceRange, WhirlpoolAprApy
from orca_yield.domain.services.apr_estimation import apr_to_apy


COMPOUND_PERIODS = 365


def out_of_range_apr_apy(price_range: StrategyPriceRange) -> WhirlpoolAprApy:
    return WhirlpoolAprApy(
        total_apr=Decimal("0"),
        total_apy=Decimal("0"),
        fee_apr=Decimal("0"),
        fee_apy=Decimal("0"),
        rewards_apr=[],
        rewards_apy=[],
        price_lower=price_range.price_lower,
        price_upper=price_range.price_upper,
        pool_price=price_range.pool_price,
        strategy_out_of_range=price_range.strategy_out_of_range,
    )


def build_apr_apy(aprs: EstimatedAprs, price_range: StrategyPriceRange) -> WhirlpoolAprApy:
    fee_apr = aprs.fee
    rewards_apr = list(aprs.rewards)
    total_apr = fee_apr + sum(rewards_apr, Decimal("0"))
    return WhirlpoolAprApy(
        total_apr=total_apr,
        total_apy=apr_to_apy(total_apr, COMPOUND_PERIODS),
        fee_apr=fee_apr,
        fee_apy=apr_to_apy(fee_apr, COMPOUND_PERIODS),
        rewards_apr=rewards_apr,
        rewards_apy=[apr_to_apy(value, COMPOUND_PERIODS) for value in rewards_apr],
        price_lower=price_range.price_lower,
        price_upper=price_range.price_upper,
        pool_price=price_range.pool_price,
        strategy_out_of_range=price_range.strategy_out_of_range,
    )
