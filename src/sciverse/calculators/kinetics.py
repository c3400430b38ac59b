"""First-order rate law helpers.

Integrated rate law: ln[A]t = -k·t + ln[A]0
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from sciverse.errors import InvalidQuantityError
from sciverse.models import CalculatedValue
from sciverse.validation import Number, non_negative_amount, positive_amount, single_missing


def first_order(
    initial: Optional[Number] = None,
    remaining: Optional[Number] = None,
    rate_constant: Optional[Number] = None,
    time: Optional[Number] = None,
) -> CalculatedValue:
    """Solve the first-order integrated rate law for the one value left as None.

    Args:
        initial: Initial concentration [A]0 (mol/L).
        remaining: Concentration [A]t at `time` (mol/L).
        rate_constant: k (1/s).
        time: t (s).
    """
    unknown = single_missing(
        {"[A]0": initial, "[A]t": remaining, "k": rate_constant, "t": time}
    )
    a0 = positive_amount(initial, "[A]0") if initial is not None else None
    at = positive_amount(remaining, "[A]t") if remaining is not None else None
    k = positive_amount(rate_constant, "Rate constant k") if rate_constant is not None else None
    t = non_negative_amount(time, "Time t") if time is not None else None

    if unknown == "[A]0":
        return CalculatedValue("Initial concentration [A]0", float(at * np.exp(k * t)), "mol/L")
    if unknown == "[A]t":
        return CalculatedValue("Concentration [A]t", float(a0 * np.exp(-k * t)), "mol/L")
    if unknown == "k":
        if t == 0:
            if a0 != at:
                raise InvalidQuantityError("Inconsistent input: Concentrations differ at t=0.")
            raise InvalidQuantityError("Cannot determine k when t=0 and concentrations are equal.")
        value = float((np.log(a0) - np.log(at)) / t)
        if value <= 0:
            raise InvalidQuantityError("Calculated rate constant must be positive.")
        return CalculatedValue("Rate constant k", value, "1/s")

    if at > a0:
        raise InvalidQuantityError("Final concentration cannot be greater than initial concentration.")
    return CalculatedValue("Time t", float((np.log(a0) - np.log(at)) / k), "s")


def half_life(rate_constant: Number) -> CalculatedValue:
    """t½ = ln 2 / k for a first-order reaction."""
    k = positive_amount(rate_constant, "Rate constant k")
    return CalculatedValue("Half-life", float(np.log(2.0) / k), "s")
