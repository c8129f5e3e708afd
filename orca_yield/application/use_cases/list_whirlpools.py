from __future__ import annotations

from orca_yield.application.ports.whirlpool_listing_port import WhirlpoolListingPort
from orca_yield.domain.entities.whirlpool import WhirlpoolListing


class ListWhirlpoolsUseCase:
    def __init__(self, *, listing_port: WhirlpoolListingPort):
        self._listing_port = listing_port

    def execute(self) -> list[WhirlpoolListing]:
        return self._listing_port.list_whirlpools()
