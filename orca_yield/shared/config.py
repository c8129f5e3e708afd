from __future__ import annotations

import json
import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


ORCA_API_BASES = {
    "mainnet-beta": "https://api.mainnet.orca.so",
    "devnet": "https://api.devnet.orca.so",
}


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _json(name: str) -> dict:
    value = _env(name)
    if not value:
        return {}
    return json.loads(value)


def orca_api_base_for_cluster(cluster: str) -> str:
    if cluster.strip().lower() == "mainnet-beta":
        return ORCA_API_BASES["mainnet-beta"]
    return ORCA_API_BASES["devnet"]


@dataclass(frozen=True)
class Settings:
    solana_cluster: str
    orca_api_base: str
    orca_api_timeout_seconds: float
    orca_api_max_retries: int
    price_overrides: dict
    coingecko_api_base: str
    coingecko_timeout_seconds: float
    coingecko_cache_ttl_seconds: float
    log_level: str


def get_settings() -> Settings:
    cluster = _env("SOLANA_CLUSTER", "mainnet-beta")
    return Settings(
        solana_cluster=cluster,
        orca_api_base=_env("ORCA_API_BASE", "") or orca_api_base_for_cluster(cluster),
        orca_api_timeout_seconds=float(_env("ORCA_API_TIMEOUT_SECONDS", "10")),
        orca_api_max_retries=int(_env("ORCA_API_MAX_RETRIES", "3")),
        price_overrides=_json("PRICE_OVERRIDES"),
        coingecko_api_base=_env("COINGECKO_API_BASE", "https://api.coingecko.com/api/v3"),
        coingecko_timeout_seconds=float(_env("COINGECKO_TIMEOUT_SECONDS", "10")),
        coingecko_cache_ttl_seconds=float(_env("COINGECKO_CACHE_TTL_SECONDS", "300")),
        log_level=_env("LOG_LEVEL", "INFO"),
    )
