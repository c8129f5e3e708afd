from __future__ import annotations

from orca_yield.domain.entities.position import (
    ABOVE_RANGE,
    BELOW_RANGE,
    IN_RANGE,
    RemoveLiquidityQuote,
    RemoveLiquidityQuoteParams,
)
from orca_yield.domain.exceptions import (
    InvalidLiquidityError,
    InvalidRangeError,
    UnknownPositionStateError,
)
from orca_yield.domain.services.position_status import get_position_status
from orca_yield.domain.services.slippage import adjust_for_slippage
from orca_yield.domain.services.whirlpool_math import (
    MAX_TICK_INDEX,
    MIN_TICK_INDEX,
    get_token_a_from_liquidity,
    get_token_b_from_liquidity,
    is_tick_index_in_bounds,
    tick_index_to_sqrt_price_x64,
)


def get_remove_liquidity_quote(
    params: RemoveLiquidityQuoteParams,
    *,
    round_up: bool = False,
) -> RemoveLiquidityQuote:
    """Estimated and slippage-adjusted minimum amounts for a full withdrawal.

    ``round_up=False`` rounds every conversion down for withdrawals; deposit
    estimation passes ``round_up=True`` explicitly.
    """
    _validate(params)

    status = get_position_status(
        params.tick_current_index,
        params.tick_lower_index,
        params.tick_upper_index,
    )
    if status == BELOW_RANGE:
        return _quote_below_range(params, round_up)
    if status == IN_RANGE:
        return _quote_in_range(params, round_up)
    if status == ABOVE_RANGE:
        return _quote_above_range(params, round_up)
    raise UnknownPositionStateError(f"type {status} is an unknown PositionStatus")


def _validate(params: RemoveLiquidityQuoteParams) -> None:
    if params.tick_lower_index >= params.tick_upper_index:
        raise InvalidRangeError("tick_lower_index must be lower than tick_upper_index.")
    if not (
        is_tick_index_in_bounds(params.tick_lower_index)
        and is_tick_index_in_bounds(params.tick_upper_index)
    ):
        raise InvalidRangeError(
            f"tick bounds must be within [{MIN_TICK_INDEX}, {MAX_TICK_INDEX}]."
        )
    if params.sqrt_price <= 0:
        raise InvalidRangeError("sqrt_price must be positive.")
    if params.liquidity < 0:
        raise InvalidLiquidityError("liquidity must not be negative.")


def _quote_below_range(params: RemoveLiquidityQuoteParams, round_up: bool) -> RemoveLiquidityQuote:
    sqrt_price_lower = tick_index_to_sqrt_price_x64(params.tick_lower_index)
    sqrt_price_upper = tick_index_to_sqrt_price_x64(params.tick_upper_index)

    est_token_a = get_token_a_from_liquidity(
        params.liquidity, sqrt_price_lower, sqrt_price_upper, round_up
    )
    min_token_a = adjust_for_slippage(est_token_a, params.slippage_tolerance, round_up=round_up)

    return RemoveLiquidityQuote(
        position_address=params.position_address,
        est_token_a=est_token_a,
        est_token_b=0,
        min_token_a=min_token_a,
        min_token_b=0,
        liquidity=params.liquidity,
    )


def _quote_in_range(params: RemoveLiquidityQuoteParams, round_up: bool) -> RemoveLiquidityQuote:
    sqrt_price = params.sqrt_price
    sqrt_price_lower = tick_index_to_sqrt_price_x64(params.tick_lower_index)
    sqrt_price_upper = tick_index_to_sqrt_price_x64(params.tick_upper_index)

    est_token_a = get_token_a_from_liquidity(params.liquidity, sqrt_price, sqrt_price_upper, round_up)
    min_token_a = adjust_for_slippage(est_token_a, params.slippage_tolerance, round_up=round_up)

    est_token_b = get_token_b_from_liquidity(params.liquidity, sqrt_price_lower, sqrt_price, round_up)
    min_token_b = adjust_for_slippage(est_token_b, params.slippage_tolerance, round_up=round_up)

    return RemoveLiquidityQuote(
        position_address=params.position_address,
        est_token_a=est_token_a,
        est_token_b=est_token_b,
        min_token_a=min_token_a,
        min_token_b=min_token_b,
        liquidity=params.liquidity,
    )


def _quote_above_range(params: RemoveLiquidityQuoteParams, round_up: bool) -> RemoveLiquidityQuote:
    sqrt_price_lower = tick_index_to_sqrt_price_x64(params.tick_lower_index)
    sqrt_price_upper = tick_index_to_sqrt_price_x64(params.tick_upper_index)

    est_token_b = get_token_b_from_liquidity(
        params.liquidity, sqrt_price_lower, sqrt_price_upper, round_up
    )
    min_token_b = adjust_for_slippage(est_token_b, params.slippage_tolerance, round_up=round_up)

    return RemoveLiquidityQuote(
        position_address=params.position_address,
        est_token_a=0,
        est_token_b=est_token_b,
        min_token_a=0,
        min_token_b=min_token_b,
        liquidity=params.liquidity,
    )
