"""
Decimal Utilities
phi_emergence/scoring/utils.py

Provides precision-safe decimal math for scoring calculations.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List


def clamp(
    value: Decimal,
    min_val: Decimal = Decimal("0"),
    max_val: Decimal = Decimal("100"),
) -> Decimal:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def ratio_percent(numerator: int, denominator: int) -> Decimal:
    """
    Percentage of numerator over denominator, clamped to [0, 100].

    Returns Decimal("0") when the denominator is zero.
    """
    if denominator <= 0:
        return Decimal("0")
    pct = Decimal(numerator) * Decimal("100") / Decimal(denominator)
    return clamp(pct.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def weighted_mean(values: List[Decimal], weights: List[Decimal]) -> Decimal:
    """
    Calculate weighted mean.

    Formula: Σ(value_i × weight_i) / Σ(weight_i)
    Returns Decimal("0") if all weights are zero.
    """
    if len(values) != len(weights):
        raise ValueError("values and weights must have same length")

    total_weight = sum(weights)
    if total_weight == 0:
        return Decimal("0")

    numerator = sum(v * w for v, w in zip(values, weights))
    return (numerator / total_weight).quantize(Decimal("0.0001"), rounding=ROUND_HALF_UP)
