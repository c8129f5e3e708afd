from __future__ import annotations

from typing import Protocol

from orca_yield.domain.entities.position import WhirlpoolPosition


class WhirlpoolPositionPort(Protocol):
    def get_position(self, *, position_address: str) -> WhirlpoolPosition | None:
        ...
