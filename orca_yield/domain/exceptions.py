from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class InvalidRangeError(DomainError):
    """Tick bounds are malformed or outside the supported tick range."""


class InvalidLiquidityError(DomainError):
    """Liquidity amount is negative."""


class InvalidSlippageToleranceError(DomainError):
    """Slippage tolerance is not a fraction between 0 and 1."""


class UnknownPositionStateError(DomainError):
    """Range classification produced a value outside the known states."""


class PoolDataNotFoundError(DomainError):
    """Pool data or pool listing could not be fetched."""


class PositionNotFoundError(DomainError):
    """Position account does not exist."""


class TokenPriceNotFoundError(DomainError):
    """Spot price missing for a token mint."""


class LiquidityDistributionInputError(DomainError):
    """Invalid parameters for the liquidity distribution."""
