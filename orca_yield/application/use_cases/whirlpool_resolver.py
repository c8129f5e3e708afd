from __future__ import annotations

import logging

from orca_yield.application.ports.whirlpool_listing_port import WhirlpoolListingPort
from orca_yield.application.ports.whirlpool_pool_port import WhirlpoolPoolPort
from orca_yield.domain.entities.whirlpool import WhirlpoolListing, WhirlpoolPoolData
from orca_yield.domain.exceptions import PoolDataNotFoundError


logger = logging.getLogger(__name__)


def resolve_whirlpool(
    *,
    pool_port: WhirlpoolPoolPort,
    listing_port: WhirlpoolListingPort,
    pool_address: str,
    whirlpools: list[WhirlpoolListing] | None,
) -> tuple[WhirlpoolPoolData, WhirlpoolListing]:
    """Pool account data plus its row in the public listing.

    ``whirlpools`` lets callers reuse a listing fetched once for many pools.
    """
    pool = pool_port.get_pool(pool_address=pool_address)
    if whirlpools is None:
        whirlpools = listing_port.list_whirlpools()

    listing = next((row for row in whirlpools if row.address == pool_address), None)
    if pool is None or listing is None:
        logger.warning(
            "whirlpool_resolver: pool_data_not_found pool=%s has_pool=%s has_listing=%s",
            pool_address,
            pool is not None,
            listing is not None,
        )
        raise PoolDataNotFoundError(f"Could not get orca pool data for {pool_address}")
    return pool, listing
