from __future__ import annotations

from orca_yield.domain.entities.position import ABOVE_RANGE, BELOW_RANGE, IN_RANGE, PositionStatus


def get_position_status(
    tick_current_index: int,
    tick_lower_index: int,
    tick_upper_index: int,
) -> PositionStatus:
    if tick_current_index < tick_lower_index:
        return BELOW_RANGE
    if tick_current_index < tick_upper_index:
        return IN_RANGE
    return ABOVE_RANGE
