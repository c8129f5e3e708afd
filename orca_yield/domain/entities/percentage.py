from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from orca_yield.domain.exceptions import InvalidSlippageToleranceError


@dataclass(frozen=True)
class Percentage:
    """Rational fraction used for slippage tolerance (1% == 1/100)."""

    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        if self.denominator <= 0:
            raise InvalidSlippageToleranceError("denominator must be positive.")
        if self.numerator < 0:
            raise InvalidSlippageToleranceError("numerator must not be negative.")
        if self.numerator > self.denominator:
            raise InvalidSlippageToleranceError("slippage tolerance must not exceed 100%.")

    @classmethod
    def from_fraction(cls, numerator: int, denominator: int) -> Percentage:
        return cls(numerator=int(numerator), denominator=int(denominator))

    @classmethod
    def from_decimal(cls, value: Decimal) -> Percentage:
        if not value.is_finite():
            raise InvalidSlippageToleranceError("slippage tolerance must be finite.")
        numerator, denominator = value.as_integer_ratio()
        return cls(numerator=numerator, denominator=denominator)

    def to_decimal(self) -> Decimal:
        return Decimal(self.numerator) / Decimal(self.denominator)


ZERO_PERCENT = Percentage(numerator=0, denominator=100)
