from __future__ import annotations

from orca_yield.application.dto.remove_liquidity_quote import (
    GetRemoveLiquidityQuoteInput,
    GetRemoveLiquidityQuoteOutput,
)
from orca_yield.domain.entities.percentage import Percentage
from orca_yield.domain.entities.position import RemoveLiquidityQuoteParams
from orca_yield.domain.services.position_status import get_position_status
from orca_yield.domain.services.remove_liquidity_quote import get_remove_liquidity_quote


class GetRemoveLiquidityQuoteUseCase:
    def execute(self, command: GetRemoveLiquidityQuoteInput) -> GetRemoveLiquidityQuoteOutput:
        params = RemoveLiquidityQuoteParams(
            position_address=command.position_address,
            tick_current_index=command.tick_current_index,
            sqrt_price=command.sqrt_price,
            tick_lower_index=command.tick_lower_index,
            tick_upper_index=command.tick_upper_index,
            liquidity=command.liquidity,
            slippage_tolerance=Percentage.from_fraction(
                command.slippage_numerator,
                command.slippage_denominator,
            ),
        )
        quote = get_remove_liquidity_quote(params, round_up=command.round_up)

        return GetRemoveLiquidityQuoteOutput(
            position_address=quote.position_address,
            position_status=get_position_status(
                params.tick_current_index,
                params.tick_lower_index,
                params.tick_upper_index,
            ),
            est_token_a=quote.est_token_a,
            est_token_b=quote.est_token_b,
            min_token_a=quote.min_token_a,
            min_token_b=quote.min_token_b,
            liquidity=quote.liquidity,
        )
