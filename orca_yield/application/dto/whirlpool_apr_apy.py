from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from orca_yield.domain.entities.whirlpool import CollateralInfo, WhirlpoolListing, WhirlpoolStrategy


@dataclass(frozen=True)
class GetStrategyAprApyInput:
    strategy: WhirlpoolStrategy
    collateral_infos: list[CollateralInfo]
    spot_prices: dict[str, Decimal]
    whirlpools: list[WhirlpoolListing] | None = None


@dataclass(frozen=True)
class GetPositionAprApyInput:
    pool_address: str
    price_lower: Decimal
    price_upper: Decimal
    spot_prices: dict[str, Decimal] | None = None
    whirlpools: list[WhirlpoolListing] | None = None
