from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from orca_yield.api.deps import get_remove_liquidity_quote_use_case
from orca_yield.api.schemas.remove_liquidity_quote import (
    RemoveLiquidityQuoteRequest,
    RemoveLiquidityQuoteResponse,
)
from orca_yield.application.dto.remove_liquidity_quote import GetRemoveLiquidityQuoteInput
from orca_yield.application.use_cases.get_remove_liquidity_quote import GetRemoveLiquidityQuoteUseCase
from orca_yield.domain.exceptions import (
    InvalidLiquidityError,
    InvalidRangeError,
    InvalidSlippageToleranceError,
    UnknownPositionStateError,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/v1/orca/remove-liquidity-quote", response_model=RemoveLiquidityQuoteResponse)
def remove_liquidity_quote(
    req: RemoveLiquidityQuoteRequest,
    use_case: GetRemoveLiquidityQuoteUseCase = Depends(get_remove_liquidity_quote_use_case),
):
    try:
        result = use_case.execute(
            GetRemoveLiquidityQuoteInput(
                position_address=req.position_address,
                tick_current_index=req.tick_current_index,
                sqrt_price=req.sqrt_price,
                tick_lower_index=req.tick_lower_index,
                tick_upper_index=req.tick_upper_index,
                liquidity=req.liquidity,
                slippage_numerator=req.slippage_tolerance.numerator,
                slippage_denominator=req.slippage_tolerance.denominator,
                round_up=req.round_up,
            )
        )
    except (InvalidRangeError, InvalidLiquidityError, InvalidSlippageToleranceError) as exc:
        logger.warning(
            "remove_liquidity_quote_router: invalid_input position=%s tick_lower=%s tick_upper=%s detail=%s",
            req.position_address,
            req.tick_lower_index,
            req.tick_upper_index,
            exc,
        )
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except UnknownPositionStateError as exc:
        logger.error(
            "remove_liquidity_quote_router: unknown_position_state position=%s detail=%s",
            req.position_address,
            exc,
        )
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return RemoveLiquidityQuoteResponse(
        position_address=result.position_address,
        position_status=result.position_status,
        est_token_a=str(result.est_token_a),
        est_token_b=str(result.est_token_b),
        min_token_a=str(result.min_token_a),
        min_token_b=str(result.min_token_b),
        liquidity=str(result.liquidity),
    )
