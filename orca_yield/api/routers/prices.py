from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from orca_yield.api.deps import get_price_service
from orca_yield.api.schemas.prices import TokenPricesResponse
from orca_yield.infrastructure.clients.pricing import PriceLookupError, PriceService

router = APIRouter()


@router.get("/v1/prices", response_model=TokenPricesResponse)
def token_prices(
    mints: str = Query(..., description="Comma separated token mints."),
    price_service: PriceService = Depends(get_price_service),
):
    requested = [mint.strip() for mint in mints.split(",") if mint.strip()]
    if not requested:
        raise HTTPException(status_code=400, detail="mints must not be empty.")
    try:
        prices = price_service.get_prices(mints=requested)
    except PriceLookupError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return TokenPricesResponse(
        prices={mint: str(value) for mint, value in prices.items()},
        missing=[mint for mint in requested if mint not in prices],
    )
