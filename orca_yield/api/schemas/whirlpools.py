from __future__ import annotations

from pydantic import BaseModel


class WhirlpoolVolumeResponse(BaseModel):
    day: str | None
    week: str | None
    month: str | None


class WhirlpoolListingResponse(BaseModel):
    address: str
    token_mint_a: str
    token_mint_b: str
    tick_spacing: int
    price: str | None
    lp_fee_rate: str | None
    volume: WhirlpoolVolumeResponse | None
    tvl: str | None
