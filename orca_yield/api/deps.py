from __future__ import annotations

from functools import lru_cache

from orca_yield.application.ports.token_price_port import TokenPricePort
from orca_yield.application.ports.whirlpool_listing_port import WhirlpoolListingPort
from orca_yield.application.use_cases.get_remove_liquidity_quote import GetRemoveLiquidityQuoteUseCase
from orca_yield.application.use_cases.list_whirlpools import ListWhirlpoolsUseCase
from orca_yield.infrastructure.clients.orca_api_client import (
    OrcaApiClientSettings,
    OrcaWhirlpoolApiClient,
)
from orca_yield.infrastructure.clients.pricing import CoingeckoPriceProvider, PriceOverrides, PriceService
from orca_yield.shared.config import get_settings


@lru_cache(maxsize=1)
def get_price_service() -> PriceService:
    settings = get_settings()
    overrides = PriceOverrides(settings.price_overrides)
    coingecko = CoingeckoPriceProvider(
        api_base=settings.coingecko_api_base,
        timeout_seconds=settings.coingecko_timeout_seconds,
        cache_ttl_seconds=settings.coingecko_cache_ttl_seconds,
    )
    return PriceService(overrides=overrides, coingecko=coingecko)


@lru_cache(maxsize=1)
def get_orca_api_client() -> OrcaWhirlpoolApiClient:
    settings = get_settings()
    return OrcaWhirlpoolApiClient(
        OrcaApiClientSettings(
            api_base=settings.orca_api_base,
            timeout_seconds=settings.orca_api_timeout_seconds,
            max_retries=settings.orca_api_max_retries,
        )
    )


def get_remove_liquidity_quote_use_case() -> GetRemoveLiquidityQuoteUseCase:
    return GetRemoveLiquidityQuoteUseCase()


def get_list_whirlpools_use_case() -> ListWhirlpoolsUseCase:
    return ListWhirlpoolsUseCase(listing_port=get_orca_api_client())


def get_whirlpool_listing_port() -> WhirlpoolListingPort:
    return get_orca_api_client()


def get_token_price_port() -> TokenPricePort:
    return get_price_service()
