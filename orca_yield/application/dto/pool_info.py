from __future__ import annotations

from dataclasses import dataclass

from orca_yield.domain.entities.whirlpool import WhirlpoolListing


@dataclass(frozen=True)
class GetGenericPoolInfoInput:
    pool_address: str
    whirlpools: list[WhirlpoolListing] | None = None
