"""Numeric input guards shared by the calculators"""

import math

from approu_calculators.domain.exceptions import ValidationError


def require_finite(**values: float) -> None:
    """Reject NaN/infinite inputs, naming the first offending field"""
    for name, value in values.items():
        if value is None or not math.isfinite(value):
            raise ValidationError(f"{name} must be a finite number, got {value!r}")


def require_non_negative(**values: float) -> None:
    """Reject negative monetary amounts or rates"""
    require_finite(**values)
    for name, value in values.items():
        if value < 0:
            raise ValidationError(f"{name} cannot be negative, got {value}")


def floor_zero(value: float) -> float:
    """Clamp a derived money value so it never goes below zero"""
    return value if value > 0 else 0.0


def compound_growth(periodic_rate: float, periods: float, name: str = "rate") -> float:
    """
    (1 + r)^n, rejecting rates that compound past the float range.

    Raises:
        ValidationError: the growth factor overflows
    """
    try:
        growth = (1 + periodic_rate) ** periods
    except OverflowError:
        raise ValidationError(f"{name} is too large to compound over {periods:g} periods") from None
    if not math.isfinite(growth):
        raise ValidationError(f"{name} is too large to compound over {periods:g} periods")
    return growth
