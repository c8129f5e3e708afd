from __future__ import annotations

from pydantic import BaseModel, Field


class TokenPricesResponse(BaseModel):
    prices: dict[str, str] = Field(..., description="USD spot price by token mint.")
    missing: list[str] = Field(default_factory=list, description="Mints without a price.")
