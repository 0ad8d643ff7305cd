"""Exact length arithmetic across edit rates."""

import math

from mxfinfo.models import Rational


def convert_length(target_rate: Rational, source_rate: Rational, length: int) -> int:
    """Re-express a length counted at ``source_rate`` in ``target_rate`` units.

    Rounds half up. Callers must pass valid, non-zero rates.

    Args:
        target_rate: Edit rate of the result
        source_rate: Edit rate ``length`` is counted in
        length: Number of edit units

    Returns:
        Number of edit units at ``target_rate``

    Raises:
        ValueError: If the conversion would divide by zero
    """
    divisor = target_rate.denominator * source_rate.numerator
    if divisor == 0:
        raise ValueError(f"Cannot convert length from {source_rate} to {target_rate}")
    return math.floor(
        length * target_rate.numerator * source_rate.denominator / divisor + 0.5
    )


def compare_length(rate_a: Rational, length_a: int, rate_b: Rational, length_b: int) -> int:
    """Compare two lengths counted at different edit rates.

    Returns:
        Zero if equal, positive if ``a`` is longer, negative if ``b`` is longer
    """
    return length_a - convert_length(rate_a, rate_b, length_b)


def round_rate(rate: Rational) -> int:
    """Round an edit rate to the nearest whole number of units per second."""
    return math.floor(rate.to_float() + 0.5)
