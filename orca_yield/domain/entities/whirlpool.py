from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class WhirlpoolReward:
    mint: str
    emissions_per_second: Decimal


@dataclass(frozen=True)
class WhirlpoolPoolData:
    address: str
    token_mint_a: str
    token_mint_b: str
    token_decimals_a: int
    token_decimals_b: int
    price: Decimal
    sqrt_price: int
    tick_current_index: int
    tick_spacing: int
    fee_rate: Decimal
    liquidity: int
    rewards: list[WhirlpoolReward] = field(default_factory=list)


@dataclass(frozen=True)
class WhirlpoolVolume:
    day: Decimal | None
    week: Decimal | None
    month: Decimal | None


@dataclass(frozen=True)
class WhirlpoolListing:
    address: str
    token_mint_a: str
    token_mint_b: str
    tick_spacing: int
    price: Decimal | None
    lp_fee_rate: Decimal | None
    volume: WhirlpoolVolume | None
    tvl: Decimal | None


@dataclass(frozen=True)
class CollateralInfo:
    mint: str


@dataclass(frozen=True)
class WhirlpoolStrategy:
    address: str
    position: str
    pool: str
    token_a_mint: str
    token_b_mint: str
    token_a_collateral_id: int
    token_b_collateral_id: int
    token_a_decimals: int
    token_b_decimals: int
    reward_collateral_ids: tuple[int, int, int]
    reward_decimals: tuple[int, int, int]


@dataclass(frozen=True)
class GenericPoolInfo:
    dex: str
    address: str
    token_mint_a: str
    token_mint_b: str
    price: Decimal
    fee_rate: Decimal
    volume_on_last_7d: Decimal | None
    tvl: Decimal | None
    tick_spacing: Decimal
    positions: Decimal
