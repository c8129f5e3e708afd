from __future__ import annotations

from decimal import Decimal

from orca_yield.application.dto.pool_info import GetGenericPoolInfoInput
from orca_yield.application.ports.whirlpool_listing_port import WhirlpoolListingPort
from orca_yield.application.ports.whirlpool_pool_port import WhirlpoolPoolPort
from orca_yield.application.use_cases.whirlpool_resolver import resolve_whirlpool
from orca_yield.domain.entities.whirlpool import GenericPoolInfo


class GetGenericPoolInfoUseCase:
    def __init__(self, *, pool_port: WhirlpoolPoolPort, listing_port: WhirlpoolListingPort):
        self._pool_port = pool_port
        self._listing_port = listing_port

    def execute(self, command: GetGenericPoolInfoInput) -> GenericPoolInfo:
        pool, listing = resolve_whirlpool(
            pool_port=self._pool_port,
            listing_port=self._listing_port,
            pool_address=command.pool_address,
            whirlpools=command.whirlpools,
        )
        week_volume = listing.volume.week if listing.volume else None
        return GenericPoolInfo(
            dex="ORCA",
            address=command.pool_address,
            token_mint_a=pool.token_mint_a,
            token_mint_b=pool.token_mint_b,
            price=pool.price,
            fee_rate=pool.fee_rate,
            volume_on_last_7d=Decimal(week_volume) if week_volume is not None else None,
            tvl=Decimal(listing.tvl) if listing.tvl is not None else None,
            tick_spacing=Decimal(pool.tick_spacing),
            positions=Decimal(self._pool_port.count_positions(pool_address=command.pool_address)),
        )
