from __future__ import annotations

import logging
from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException

from orca_yield.api.deps import get_token_price_port, get_whirlpool_listing_port
from orca_yield.api.mappers.whirlpool_state import to_initialized_ticks, to_pool_data, to_position
from orca_yield.api.schemas.whirlpool_yield import (
    GenericPoolInfoResponse,
    LiquidityDistributionRequest,
    LiquidityDistributionResponse,
    LiquidityForPriceResponse,
    PoolInfoRequest,
    PositionAprApyRequest,
    StrategyAprApyRequest,
    WhirlpoolAprApyResponse,
)
from orca_yield.application.dto.liquidity_distribution import GetLiquidityDistributionInput
from orca_yield.application.dto.pool_info import GetGenericPoolInfoInput
from orca_yield.application.dto.whirlpool_apr_apy import GetPositionAprApyInput, GetStrategyAprApyInput
from orca_yield.application.ports.token_price_port import TokenPricePort
from orca_yield.application.ports.whirlpool_listing_port import WhirlpoolListingPort
from orca_yield.application.use_cases.get_generic_pool_info import GetGenericPoolInfoUseCase
from orca_yield.application.use_cases.get_liquidity_distribution import GetLiquidityDistributionUseCase
from orca_yield.application.use_cases.get_position_apr_apy import GetPositionAprApyUseCase
from orca_yield.application.use_cases.get_strategy_apr_apy import GetStrategyAprApyUseCase
from orca_yield.domain.entities.whirlpool import CollateralInfo, WhirlpoolStrategy
from orca_yield.domain.entities.yield_estimate import WhirlpoolAprApy
from orca_yield.domain.exceptions import (
    InvalidRangeError,
    LiquidityDistributionInputError,
    PoolDataNotFoundError,
    PositionNotFoundError,
    TokenPriceNotFoundError,
)
from orca_yield.infrastructure.clients.orca_api_client import WhirlpoolApiError
from orca_yield.infrastructure.clients.pricing import PriceLookupError
from orca_yield.infrastructure.snapshots.whirlpool_snapshot_repository import WhirlpoolSnapshotRepository

router = APIRouter()
logger = logging.getLogger(__name__)


def _dec_to_str_or_none(value: Decimal | None) -> str | None:
    return str(value) if value is not None else None


def _apr_apy_response(result: WhirlpoolAprApy) -> WhirlpoolAprApyResponse:
    return WhirlpoolAprApyResponse(
        total_apr=str(result.total_apr),
        total_apy=str(result.total_apy),
        fee_apr=str(result.fee_apr),
        fee_apy=str(result.fee_apy),
        rewards_apr=[str(value) for value in result.rewards_apr],
        rewards_apy=[str(value) for value in result.rewards_apy],
        price_lower=str(result.price_lower),
        price_upper=str(result.price_upper),
        pool_price=str(result.pool_price),
        strategy_out_of_range=result.strategy_out_of_range,
    )


@router.post("/v1/orca/position-apr-apy", response_model=WhirlpoolAprApyResponse)
def position_apr_apy(
    req: PositionAprApyRequest,
    listing_port: WhirlpoolListingPort = Depends(get_whirlpool_listing_port),
    price_port: TokenPricePort = Depends(get_token_price_port),
):
    use_case = GetPositionAprApyUseCase(
        pool_port=WhirlpoolSnapshotRepository(pool=to_pool_data(req.pool)),
        listing_port=listing_port,
        price_port=price_port,
    )
    try:
        result = use_case.execute(
            GetPositionAprApyInput(
                pool_address=req.pool.address,
                price_lower=req.price_lower,
                price_upper=req.price_upper,
                spot_prices=req.spot_prices,
            )
        )
    except (InvalidRangeError, TokenPriceNotFoundError) as exc:
        logger.warning(
            "whirlpool_yield_router: invalid_position_apr_input pool=%s detail=%s",
            req.pool.address,
            exc,
        )
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except PoolDataNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except (WhirlpoolApiError, PriceLookupError) as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return _apr_apy_response(result)


@router.post("/v1/orca/strategy-apr-apy", response_model=WhirlpoolAprApyResponse)
def strategy_apr_apy(
    req: StrategyAprApyRequest,
    listing_port: WhirlpoolListingPort = Depends(get_whirlpool_listing_port),
):
    snapshot = WhirlpoolSnapshotRepository(
        pool=to_pool_data(req.pool),
        positions=[to_position(req.position, pool_address=req.pool.address)],
    )
    use_case = GetStrategyAprApyUseCase(
        pool_port=snapshot,
        position_port=snapshot,
        listing_port=listing_port,
    )
    strategy = WhirlpoolStrategy(
        address=req.strategy.address,
        position=req.position.address,
        pool=req.pool.address,
        token_a_mint=req.pool.token_mint_a,
        token_b_mint=req.pool.token_mint_b,
        token_a_collateral_id=req.strategy.token_a_collateral_id,
        token_b_collateral_id=req.strategy.token_b_collateral_id,
        token_a_decimals=req.strategy.token_a_decimals,
        token_b_decimals=req.strategy.token_b_decimals,
        reward_collateral_ids=tuple(req.strategy.reward_collateral_ids),
        reward_decimals=tuple(req.strategy.reward_decimals),
    )
    try:
        result = use_case.execute(
            GetStrategyAprApyInput(
                strategy=strategy,
                collateral_infos=[CollateralInfo(mint=mint) for mint in req.collateral_mints],
                spot_prices=req.spot_prices,
            )
        )
    except (InvalidRangeError, TokenPriceNotFoundError) as exc:
        logger.warning(
            "whirlpool_yield_router: invalid_strategy_apr_input strategy=%s detail=%s",
            req.strategy.address,
            exc,
        )
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except (PoolDataNotFoundError, PositionNotFoundError) as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except WhirlpoolApiError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return _apr_apy_response(result)


@router.post("/v1/orca/liquidity-distribution", response_model=LiquidityDistributionResponse)
def liquidity_distribution(req: LiquidityDistributionRequest):
    use_case = GetLiquidityDistributionUseCase(
        pool_port=WhirlpoolSnapshotRepository(
            pool=to_pool_data(req.pool),
            initialized_ticks=to_initialized_ticks(req.initialized_ticks),
        )
    )
    try:
        result = use_case.execute(
            GetLiquidityDistributionInput(
                pool_address=req.pool.address,
                keep_order=req.keep_order,
                lowest_tick=req.lowest_tick,
                highest_tick=req.highest_tick,
            )
        )
    except LiquidityDistributionInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except PoolDataNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return LiquidityDistributionResponse(
        current_price=str(result.current_price),
        current_tick_index=result.current_tick_index,
        distribution=[
            LiquidityForPriceResponse(
                price=str(item.price),
                liquidity=str(item.liquidity),
                tick_index=item.tick_index,
            )
            for item in result.distribution
        ],
    )


@router.post("/v1/orca/pool-info", response_model=GenericPoolInfoResponse)
def pool_info(
    req: PoolInfoRequest,
    listing_port: WhirlpoolListingPort = Depends(get_whirlpool_listing_port),
):
    use_case = GetGenericPoolInfoUseCase(
        pool_port=WhirlpoolSnapshotRepository(
            pool=to_pool_data(req.pool),
            positions_count=req.positions_count,
        ),
        listing_port=listing_port,
    )
    try:
        result = use_case.execute(GetGenericPoolInfoInput(pool_address=req.pool.address))
    except PoolDataNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except WhirlpoolApiError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return GenericPoolInfoResponse(
        dex=result.dex,
        address=result.address,
        token_mint_a=result.token_mint_a,
        token_mint_b=result.token_mint_b,
        price=str(result.price),
        fee_rate=str(result.fee_rate),
        volume_on_last_7d=_dec_to_str_or_none(result.volume_on_last_7d),
        tvl=_dec_to_str_or_none(result.tvl),
        tick_spacing=str(result.tick_spacing),
        positions=str(result.positions),
    )
