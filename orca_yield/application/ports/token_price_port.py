from __future__ import annotations

from decimal import Decimal
from typing import Protocol


class TokenPricePort(Protocol):
    def get_prices(self, *, mints: list[str]) -> dict[str, Decimal]:
        ...
