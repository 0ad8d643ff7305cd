"""Exact rational model for edit rates and ratios."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class Rational(BaseModel):
    """Signed 32-bit numerator/denominator pair.

    Used for edit rates, sample rates and aspect ratios. The pair is kept
    exactly as stored in the file and is never reduced, so ``50/2`` and
    ``25/1`` are different values.
    """

    model_config = ConfigDict(frozen=True)

    numerator: int
    denominator: int

    @field_validator("numerator", "denominator")
    @classmethod
    def validate_int32(cls, v: int) -> int:
        """Both terms must fit in a signed 32-bit integer."""
        if not INT32_MIN <= v <= INT32_MAX:
            raise ValueError(f"{v} does not fit in a signed 32-bit integer")
        return v

    @classmethod
    def parse(cls, value: str) -> Rational:
        """Parse ``"num/den"`` (or a bare integer, meaning ``num/1``)."""
        num, sep, den = value.strip().partition("/")
        return cls(numerator=int(num), denominator=int(den) if sep else 1)

    @property
    def is_valid(self) -> bool:
        """A zero denominator marks an absent or invalid value."""
        return self.denominator != 0

    @property
    def is_positive(self) -> bool:
        """Both terms are above zero, as any usable edit rate must be."""
        return self.numerator > 0 and self.denominator > 0

    def to_float(self) -> float:
        """Return the rate as a float.

        Raises:
            ZeroDivisionError: If the denominator is zero
        """
        return self.numerator / self.denominator

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"
