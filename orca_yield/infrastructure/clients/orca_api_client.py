from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import logging
import time

import httpx

from orca_yield.domain.entities.whirlpool import WhirlpoolListing, WhirlpoolVolume


logger = logging.getLogger(__name__)


class WhirlpoolApiError(RuntimeError):
    pass


@dataclass(frozen=True)
class OrcaApiClientSettings:
    api_base: str
    timeout_seconds: float
    max_retries: int


def _to_decimal(value) -> Decimal | None:
    if value is None:
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return None


def _token_mint(row: dict, key: str) -> str:
    token = row.get(key)
    if not isinstance(token, dict):
        return ""
    return token.get("mint") or ""


class OrcaWhirlpoolApiClient:
    def __init__(self, settings: OrcaApiClientSettings):
        self._settings = settings

    def list_whirlpools(self) -> list[WhirlpoolListing]:
        payload = self._get_json("/v1/whirlpool/list")
        rows = payload.get("whirlpools") or []

        mapped: list[WhirlpoolListing] = []
        skipped = 0
        for row in rows:
            listing = self._map_listing(row)
            if listing is None:
                skipped += 1
                continue
            mapped.append(listing)

        logger.info(
            "orca_api_client: fetched_whirlpools fetched=%s skipped=%s api_base=%s",
            len(mapped),
            skipped,
            self._settings.api_base,
        )
        return mapped

    def _map_listing(self, row) -> WhirlpoolListing | None:
        if not isinstance(row, dict):
            return None
        address = row.get("address")
        try:
            tick_spacing = int(row.get("tickSpacing"))
        except (TypeError, ValueError):
            return None
        if not address:
            return None

        volume_row = row.get("volume")
        volume = None
        if isinstance(volume_row, dict):
            volume = WhirlpoolVolume(
                day=_to_decimal(volume_row.get("day")),
                week=_to_decimal(volume_row.get("week")),
                month=_to_decimal(volume_row.get("month")),
            )

        return WhirlpoolListing(
            address=address,
            token_mint_a=_token_mint(row, "tokenA"),
            token_mint_b=_token_mint(row, "tokenB"),
            tick_spacing=tick_spacing,
            price=_to_decimal(row.get("price")),
            lp_fee_rate=_to_decimal(row.get("lpFeeRate")),
            volume=volume,
            tvl=_to_decimal(row.get("tvl")),
        )

    def _get_json(self, path: str) -> dict:
        url = f"{self._settings.api_base.rstrip('/')}{path}"
        attempts = max(1, self._settings.max_retries)
        delay = 0.25
        last_exc: Exception | None = None

        for attempt in range(1, attempts + 1):
            try:
                with httpx.Client(timeout=self._settings.timeout_seconds) as client:
                    response = client.get(url)
                    response.raise_for_status()
                    payload = response.json()
                if not isinstance(payload, dict):
                    raise ValueError("Unexpected payload shape from Orca API.")
                return payload
            except (httpx.HTTPError, ValueError) as exc:
                last_exc = exc
                if attempt == attempts:
                    break
                logger.warning(
                    "orca_api_client: request_retry attempt=%s/%s url=%s error=%s",
                    attempt,
                    attempts,
                    url,
                    exc,
                )
                time.sleep(delay)
                delay *= 2

        raise WhirlpoolApiError(f"Orca API request failed after retries: {last_exc}") from last_exc
