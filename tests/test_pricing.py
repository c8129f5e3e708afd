from __future__ import annotations

from decimal import Decimal

from fastapi.testclient import TestClient
import httpx
import pytest

from orca_yield.api.deps import get_price_service
from orca_yield.infrastructure.clients.pricing import (
    CoingeckoPriceProvider,
    PriceLookupError,
    PriceOverrides,
    PriceService,
)
from orca_yield.main import app


_REAL_CLIENT = httpx.Client

SOL = "So11111111111111111111111111111111111111112"
USDC = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
ORCA = "orcaEKTdK7LKz57vaAYr9QeNsVEPfiu6QeMU1kektZE"


def _use_transport(monkeypatch: pytest.MonkeyPatch, handler) -> None:
    transport = httpx.MockTransport(handler)
    monkeypatch.setattr(
        "orca_yield.infrastructure.clients.pricing.httpx.Client",
        lambda **kwargs: _REAL_CLIENT(transport=transport, **kwargs),
    )


def test_overrides_return_decimal_or_none():
    overrides = PriceOverrides({USDC: "1.0", SOL: 150})

    assert overrides.get_price(USDC) == Decimal("1.0")
    assert overrides.get_price(f" {SOL} ") == Decimal("150")
    assert overrides.get_price(ORCA) is None
    assert PriceOverrides([]).get_price(USDC) is None


def test_coingecko_prices_are_cached(monkeypatch: pytest.MonkeyPatch):
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={SOL.lower(): {"usd": 151.2}, ORCA: {"usd": "0.85"}})

    _use_transport(monkeypatch, handler)
    provider = CoingeckoPriceProvider(api_base="https://api.coingecko.com/api/v3/", timeout_seconds=5)

    first = provider.get_prices_usd([SOL, ORCA])
    second = provider.get_prices_usd([SOL, ORCA])

    assert first == {SOL: Decimal("151.2"), ORCA: Decimal("0.85")}
    assert second == first
    assert len(requests) == 1
    assert requests[0].url.path == "/api/v3/simple/token_price/solana"
    assert requests[0].url.params["contract_addresses"] == f"{SOL},{ORCA}"
    assert requests[0].url.params["vs_currencies"] == "usd"


def test_coingecko_cache_disabled_refetches(monkeypatch: pytest.MonkeyPatch):
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        return httpx.Response(200, json={SOL: {"usd": 150}})

    _use_transport(monkeypatch, handler)
    provider = CoingeckoPriceProvider(api_base="https://api.coingecko.com/api/v3", timeout_seconds=5, cache_ttl_seconds=0)

    provider.get_prices_usd([SOL])
    provider.get_prices_usd([SOL])

    assert calls["count"] == 2


def test_coingecko_http_error_raises_lookup_error(monkeypatch: pytest.MonkeyPatch):
    _use_transport(monkeypatch, lambda request: httpx.Response(429, text="rate limited"))
    provider = CoingeckoPriceProvider(api_base="https://api.coingecko.com/api/v3", timeout_seconds=5)

    with pytest.raises(PriceLookupError):
        provider.get_prices_usd([SOL])


class FakeCoingecko:
    def __init__(self, prices: dict[str, Decimal]):
        self.prices = prices
        self.requested: list[list[str]] = []

    def get_prices_usd(self, mints: list[str]) -> dict[str, Decimal]:
        self.requested.append(list(mints))
        return {mint: self.prices[mint] for mint in mints if mint in self.prices}


def test_price_service_prefers_overrides_and_deduplicates():
    coingecko = FakeCoingecko({SOL: Decimal("150"), USDC: Decimal("0.99")})
    service = PriceService(overrides=PriceOverrides({USDC: "1"}), coingecko=coingecko)

    prices = service.get_prices(mints=[SOL, USDC, SOL, ORCA])

    assert prices == {SOL: Decimal("150"), USDC: Decimal("1")}
    assert coingecko.requested == [[SOL, ORCA]]


def test_price_service_skips_remote_when_all_overridden():
    coingecko = FakeCoingecko({})
    service = PriceService(overrides=PriceOverrides({USDC: "1"}), coingecko=coingecko)

    assert service.get_prices(mints=[USDC]) == {USDC: Decimal("1")}
    assert coingecko.requested == []


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>maintenance</html>"),
        httpx.Response(200, json=["unexpected"]),
    ],
)
def test_coingecko_malformed_payload_raises_lookup_error(monkeypatch: pytest.MonkeyPatch, response: httpx.Response):
    _use_transport(monkeypatch, lambda request: response)
    provider = CoingeckoPriceProvider(api_base="https://api.coingecko.com/api/v3", timeout_seconds=5)

    with pytest.raises(PriceLookupError):
        provider.get_prices_usd([SOL])


def test_coingecko_skips_entries_without_usd(monkeypatch: pytest.MonkeyPatch):
    _use_transport(monkeypatch, lambda request: httpx.Response(200, json={SOL: "150", ORCA: {"usd": None}}))
    provider = CoingeckoPriceProvider(api_base="https://api.coingecko.com/api/v3", timeout_seconds=5)

    assert provider.get_prices_usd([SOL, ORCA]) == {}


def test_prices_route_maps_malformed_coingecko_payload_to_bad_gateway(monkeypatch: pytest.MonkeyPatch):
    _use_transport(monkeypatch, lambda request: httpx.Response(200, text="not json"))
    service = PriceService(
        overrides=PriceOverrides({}),
        coingecko=CoingeckoPriceProvider(api_base="https://api.coingecko.com/api/v3", timeout_seconds=5),
    )
    app.dependency_overrides[get_price_service] = lambda: service

    response = TestClient(app).get("/v1/prices", params={"mints": SOL})

    assert response.status_code == 502

    app.dependency_overrides.clear()
