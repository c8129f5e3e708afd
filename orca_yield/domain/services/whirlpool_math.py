from __future__ import annotations

import math
from decimal import Decimal, localcontext


MIN_TICK_INDEX = -443636
MAX_TICK_INDEX = 443636
Q64 = 1 << 64
U256_MAX = (1 << 256) - 1
TICK_BASE = Decimal("1.0001")
DECIMAL_PRECISION = 60

# sqrt(1.0001)^-(2^i) in Q128.128, one entry per bit of |tick|.
_TICK_RATIOS_X128 = (
    0xFFFCB933BD6FAD37AA2D162D1A594001,
    0xFFF97272373D413259A46990580E213A,
    0xFFF2E50F5F656932EF12357CF3C7FDCC,
    0xFFE5CACA7E10E4E61C3624EAA0941CD0,
    0xFFCB9843D60F6159C9DB58835C926644,
    0xFF973B41FA98C081472E6896DFB254C0,
    0xFF2EA16466C96A3843EC78B326B52861,
    0xFE5DEE046A99A2A811C461F1969C3053,
    0xFCBE86C7900A88AEDCFFC83B479AA3A4,
    0xF987A7253AC413176F2B074CF7815E54,
    0xF3392B0822B70005940C7A398E4B70F3,
    0xE7159475A2C29B7443B29C7FA6E889D9,
    0xD097F3BDFD2022B8845AD8F792AA5825,
    0xA9F746462D870FDF8A65DC1F90E061E5,
    0x70D869A156D2A1B890BB3DF62BAF32F7,
    0x31BE135F97D08FD981231505542FCFA6,
    0x9AA508B5B7A84E1C677DE54F3E99BC9,
    0x5D6AF8DEDB81196699C329225EE604,
    0x2216E584F5FA1EA926041BEDFE98,
    0x48A170391F7DC42444E8FA2,
)


def is_tick_index_in_bounds(tick_index: int) -> bool:
    return MIN_TICK_INDEX <= tick_index <= MAX_TICK_INDEX


def tick_index_to_sqrt_price_x64(tick_index: int) -> int:
    """Square root of ``1.0001 ** tick_index`` as a Q64.64 integer.

    Tick 0 maps exactly to ``2**64``. Raises ``ValueError`` outside
    ``[MIN_TICK_INDEX, MAX_TICK_INDEX]``.
    """
    if not is_tick_index_in_bounds(tick_index):
        raise ValueError(f"tick_index {tick_index} out of bounds.")

    abs_tick = abs(tick_index)
    ratio = 1 << 128
    for bit, factor in enumerate(_TICK_RATIOS_X128):
        if abs_tick & (1 << bit):
            ratio = (ratio * factor) >> 128
    if tick_index > 0:
        ratio = U256_MAX // ratio
    return ratio >> 64


def _order_sqrt_prices(sqrt_price_0: int, sqrt_price_1: int) -> tuple[int, int]:
    if sqrt_price_0 <= sqrt_price_1:
        return sqrt_price_0, sqrt_price_1
    return sqrt_price_1, sqrt_price_0


def _div_round_up(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def get_token_a_from_liquidity(
    liquidity: int,
    sqrt_price_0: int,
    sqrt_price_1: int,
    round_up: bool,
) -> int:
    sqrt_price_lower, sqrt_price_upper = _order_sqrt_prices(sqrt_price_0, sqrt_price_1)
    if sqrt_price_lower <= 0:
        raise ValueError("sqrt prices must be positive.")
    numerator = (liquidity * (sqrt_price_upper - sqrt_price_lower)) << 64
    denominator = sqrt_price_upper * sqrt_price_lower
    if round_up:
        return _div_round_up(numerator, denominator)
    return numerator // denominator


def get_token_b_from_liquidity(
    liquidity: int,
    sqrt_price_0: int,
    sqrt_price_1: int,
    round_up: bool,
) -> int:
    sqrt_price_lower, sqrt_price_upper = _order_sqrt_prices(sqrt_price_0, sqrt_price_1)
    result = liquidity * (sqrt_price_upper - sqrt_price_lower)
    if round_up:
        return _div_round_up(result, Q64)
    return result >> 64


def sqrt_price_x64_to_price(sqrt_price_x64: int, token_decimals_a: int, token_decimals_b: int) -> Decimal:
    if sqrt_price_x64 <= 0:
        raise ValueError("Invalid sqrt_price_x64.")
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        sqrt_price = Decimal(sqrt_price_x64) / Decimal(Q64)
        decimal_adjust = Decimal(10) ** (token_decimals_a - token_decimals_b)
        return +(sqrt_price * sqrt_price * decimal_adjust)


def tick_index_to_price(tick_index: int, token_decimals_a: int, token_decimals_b: int) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        decimal_adjust = Decimal(10) ** (token_decimals_a - token_decimals_b)
        return +(TICK_BASE ** tick_index * decimal_adjust)


def price_to_tick_index(price: Decimal, token_decimals_a: int, token_decimals_b: int) -> int:
    if price <= 0:
        raise ValueError("price must be positive.")
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        raw_price = price * Decimal(10) ** (token_decimals_b - token_decimals_a)
        tick = raw_price.ln() / TICK_BASE.ln()
    # Snap values that land a rounding error below an exact tick.
    nearest = int(tick.to_integral_value())
    if abs(tick - nearest) < Decimal("1e-30"):
        return nearest
    return math.floor(tick)


def get_nearest_valid_tick_index(tick_index: int, tick_spacing: int) -> int:
    if tick_spacing <= 0:
        raise ValueError("tick_spacing must be positive.")
    remainder = int(math.fmod(tick_index, tick_spacing))
    return tick_index - remainder
