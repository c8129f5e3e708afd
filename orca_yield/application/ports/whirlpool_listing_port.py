from __future__ import annotations

from typing import Protocol

from orca_yield.domain.entities.whirlpool import WhirlpoolListing


class WhirlpoolListingPort(Protocol):
    def list_whirlpools(self) -> list[WhirlpoolListing]:
        ...
