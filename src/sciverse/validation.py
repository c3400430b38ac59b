"""Input validation and number formatting shared by the calculators."""

from __future__ import annotations

import math
from typing import Mapping, Optional, Union

from sciverse.errors import InvalidQuantityError

Number = Union[float, int, str]


def as_float(value: Number, name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidQuantityError(f"{name} must be a number, got {value!r}.") from None
    if not math.isfinite(number):
        raise InvalidQuantityError(f"{name} must be a finite number.")
    return number


def positive_amount(value: Number, name: str = "Quantity") -> float:
    """Convert `value` to a finite float greater than zero."""
    number = as_float(value, name)
    if number <= 0:
        raise InvalidQuantityError(f"{name} must be positive.")
    return number


def non_negative_amount(value: Number, name: str = "Quantity") -> float:
    number = as_float(value, name)
    if number < 0:
        raise InvalidQuantityError(f"{name} cannot be negative.")
    return number


def single_missing(values: Mapping[str, Optional[Number]]) -> str:
    """Return the name of the one value left as None.

    Raises:
        InvalidQuantityError: Unless exactly one value is missing.
    """
    missing = [name for name, value in values.items() if value is None]
    if len(missing) != 1:
        raise InvalidQuantityError(
            f"Provide exactly {len(values) - 1} of {', '.join(values)}; leave one blank to solve for it."
        )
    return missing[0]


def format_amount(value: float, precision: int = 5) -> str:
    """Fixed-point text with trailing zeros stripped ("35.74603", "2")."""
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
