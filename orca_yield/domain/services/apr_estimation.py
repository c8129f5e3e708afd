from __future__ import annotations

from decimal import Decimal

from orca_yield.domain.entities.percentage import ZERO_PERCENT
from orca_yield.domain.entities.position import RemoveLiquidityQuoteParams
from orca_yield.domain.entities.whirlpool import WhirlpoolPoolData, WhirlpoolReward
from orca_yield.domain.entities.yield_estimate import EstimatedAprs
from orca_yield.domain.services.remove_liquidity_quote import get_remove_liquidity_quote


SECONDS_PER_YEAR = Decimal(60 * 60 * 24 * 365)
NUM_REWARDS = 3
DEFAULT_PUBKEY = "11111111111111111111111111111111"


def zero_aprs() -> EstimatedAprs:
    return EstimatedAprs(fee=Decimal("0"), rewards=[Decimal("0")] * NUM_REWARDS)


def estimate_aprs_for_price_range(
    *,
    pool: WhirlpoolPoolData,
    token_prices: dict[str, Decimal],
    fees_24h_usd: Decimal,
    tick_lower_index: int,
    tick_upper_index: int,
) -> EstimatedAprs:
    """Fee and reward APRs for liquidity concentrated in the given tick range.

    The pool's whole active liquidity is valued as if it sat between the two
    ticks. That value is an upper bound of the real capital in range, so the
    resulting APRs are conservative.
    """
    token_price_a = token_prices.get(pool.token_mint_a)
    token_price_b = token_prices.get(pool.token_mint_b)
    if (
        not fees_24h_usd
        or fees_24h_usd <= 0
        or not token_price_a
        or not token_price_b
        or tick_lower_index >= tick_upper_index
    ):
        return zero_aprs()

    quote = get_remove_liquidity_quote(
        RemoveLiquidityQuoteParams(
            position_address=DEFAULT_PUBKEY,
            tick_current_index=pool.tick_current_index,
            sqrt_price=pool.sqrt_price,
            tick_lower_index=tick_lower_index,
            tick_upper_index=tick_upper_index,
            liquidity=pool.liquidity,
            slippage_tolerance=ZERO_PERCENT,
        ),
        round_up=False,
    )
    token_value_a = get_token_value(quote.min_token_a, pool.token_decimals_a, token_price_a)
    token_value_b = get_token_value(quote.min_token_b, pool.token_decimals_b, token_price_b)
    concentrated_value = token_value_a + token_value_b
    if concentrated_value <= 0:
        return zero_aprs()

    # fees_24h_usd is in whole USD, so no 1e6 micro-unit scale is applied.
    fees_per_year = Decimal(fees_24h_usd) * Decimal("365")
    fee_apr = fees_per_year / concentrated_value

    rewards = [
        estimate_reward_apr(reward, concentrated_value, token_prices)
        for reward in pool.rewards[:NUM_REWARDS]
    ]
    rewards.extend([Decimal("0")] * (NUM_REWARDS - len(rewards)))
    return EstimatedAprs(fee=fee_apr, rewards=rewards)


def estimate_reward_apr(
    reward: WhirlpoolReward,
    concentrated_value: Decimal,
    token_prices: dict[str, Decimal],
) -> Decimal:
    reward_token_price = token_prices.get(reward.mint) if reward.mint else None
    if not reward.emissions_per_second or not reward_token_price or concentrated_value <= 0:
        return Decimal("0")
    return reward.emissions_per_second * SECONDS_PER_YEAR * reward_token_price / concentrated_value


def get_token_value(token_amount: int, decimals: int, token_price: Decimal) -> Decimal:
    return Decimal(token_amount) / (Decimal(10) ** decimals) * token_price


def apr_to_apy(apr: Decimal, compound_periods: int = 365) -> Decimal:
    if compound_periods <= 0:
        raise ValueError("compound_periods must be positive.")
    periods = Decimal(compound_periods)
    return (Decimal("1") + Decimal(apr) / periods) ** compound_periods - Decimal("1")
