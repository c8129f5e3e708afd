from __future__ import annotations

from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException

from orca_yield.api.deps import get_list_whirlpools_use_case
from orca_yield.api.schemas.whirlpools import WhirlpoolListingResponse, WhirlpoolVolumeResponse
from orca_yield.application.use_cases.list_whirlpools import ListWhirlpoolsUseCase
from orca_yield.infrastructure.clients.orca_api_client import WhirlpoolApiError

router = APIRouter()


def _dec_to_str_or_none(value: Decimal | None) -> str | None:
    return str(value) if value is not None else None


@router.get("/v1/orca/whirlpools", response_model=list[WhirlpoolListingResponse])
def list_whirlpools(
    use_case: ListWhirlpoolsUseCase = Depends(get_list_whirlpools_use_case),
):
    try:
        rows = use_case.execute()
    except WhirlpoolApiError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return [
        WhirlpoolListingResponse(
            address=row.address,
            token_mint_a=row.token_mint_a,
            token_mint_b=row.token_mint_b,
            tick_spacing=row.tick_spacing,
            price=_dec_to_str_or_none(row.price),
            lp_fee_rate=_dec_to_str_or_none(row.lp_fee_rate),
            volume=(
                WhirlpoolVolumeResponse(
                    day=_dec_to_str_or_none(row.volume.day),
                    week=_dec_to_str_or_none(row.volume.week),
                    month=_dec_to_str_or_none(row.volume.month),
                )
                if row.volume is not None
                else None
            ),
            tvl=_dec_to_str_or_none(row.tvl),
        )
        for row in rows
    ]
