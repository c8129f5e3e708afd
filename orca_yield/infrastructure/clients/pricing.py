from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
import logging
from threading import Lock
import time

import httpx


logger = logging.getLogger(__name__)

COINGECKO_PLATFORM = "solana"


class PriceLookupError(RuntimeError):
    pass


@dataclass(frozen=True)
class PriceOverrides:
    """Static spot prices keyed by mint, e.g. ``{"<mint>": "1.0"}``."""

    data: dict

    def get_price(self, mint: str) -> Decimal | None:
        if not isinstance(self.data, dict):
            return None
        value = self.data.get(mint.strip())
        if value is None:
            return None
        return Decimal(str(value))


class CoingeckoPriceProvider:
    def __init__(self, api_base: str, timeout_seconds: float, cache_ttl_seconds: float = 300):
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout_seconds
        self.cache_ttl_seconds = cache_ttl_seconds
        self._cache: dict[str, tuple[float, Decimal]] = {}
        self._lock = Lock()

    def _cache_get(self, mint: str) -> Decimal | None:
        if self.cache_ttl_seconds <= 0:
            return None
        now = time.monotonic()
        with self._lock:
            cached = self._cache.get(mint)
            if cached is None:
                return None
            expires_at, value = cached
            if expires_at <= now:
                self._cache.pop(mint, None)
                return None
            return value

    def _cache_set(self, mint: str, value: Decimal) -> None:
        if self.cache_ttl_seconds <= 0:
            return
        expires_at = time.monotonic() + self.cache_ttl_seconds
        with self._lock:
            self._cache[mint] = (expires_at, value)

    def get_prices_usd(self, mints: list[str]) -> dict[str, Decimal]:
        result: dict[str, Decimal] = {}
        missing: list[str] = []
        for mint in mints:
            cached = self._cache_get(mint)
            if cached is not None:
                result[mint] = cached
            else:
                missing.append(mint)
        if not missing:
            return result

        url = f"{self.api_base}/simple/token_price/{COINGECKO_PLATFORM}"
        params = {
            "contract_addresses": ",".join(missing),
            "vs_currencies": "usd",
        }
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.get(url, params=params)
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise PriceLookupError(f"Coingecko request failed: {exc}") from exc
        if not isinstance(payload, dict):
            raise PriceLookupError("Unexpected payload shape from Coingecko.")

        fetched = 0
        for mint in missing:
            # Solana mints are case sensitive but the API may echo them lowercased.
            entry = payload.get(mint) or payload.get(mint.lower())
            if not isinstance(entry, dict) or entry.get("usd") is None:
                continue
            value = Decimal(str(entry["usd"]))
            self._cache_set(mint, value)
            result[mint] = value
            fetched += 1

        logger.info(
            "pricing: fetched_prices requested=%s fetched=%s",
            len(missing),
            fetched,
        )
        return result


class PriceService:
    def __init__(self, overrides: PriceOverrides, coingecko: CoingeckoPriceProvider):
        self.overrides = overrides
        self.coingecko = coingecko

    def get_prices(self, *, mints: list[str]) -> dict[str, Decimal]:
        prices: dict[str, Decimal] = {}
        remaining: list[str] = []
        for mint in dict.fromkeys(mints):
            override = self.overrides.get_price(mint)
            if override is not None:
                prices[mint] = override
            else:
                remaining.append(mint)
        if remaining:
            prices.update(self.coingecko.get_prices_usd(remaining))

        unresolved = [mint for mint in remaining if mint not in prices]
        if unresolved:
            logger.warning("pricing: unresolved_prices mints=%s", ",".join(unresolved))
        return prices
