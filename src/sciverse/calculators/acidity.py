"""pH / pOH relations for aqueous solutions at 25 °C."""

from __future__ import annotations

import math
from dataclasses import dataclass

from sciverse.constants import DEFAULT_CONSTANTS, PhysicalConstants
from sciverse.errors import InvalidQuantityError
from sciverse.validation import Number, as_float, positive_amount

INPUT_KINDS = ("pH", "pOH", "H+", "OH-")


@dataclass(frozen=True)
class AcidityProfile:
    ph: float
    poh: float
    hydronium: float  # [H+] mol/L
    hydroxide: float  # [OH-] mol/L


def _check_scale(name: str, value: float, pkw: float) -> None:
    if value < 0 or value > pkw:
        raise InvalidQuantityError(f"{name} must be between 0 and {pkw:g}.")


def acidity_profile(
    value: Number,
    kind: str = "pH",
    constants: PhysicalConstants = DEFAULT_CONSTANTS,
) -> AcidityProfile:
    """Derive pH, pOH, [H+] and [OH-] from any one of them.

    Args:
        value: The known value.
        kind: Which value is known: ``"pH"``, ``"pOH"``, ``"H+"`` or ``"OH-"``.
    """
    pkw = constants.pkw
    if kind == "pH":
        ph = as_float(value, "pH")
        _check_scale("pH", ph, pkw)
    elif kind == "pOH":
        poh = as_float(value, "pOH")
        _check_scale("pOH", poh, pkw)
        ph = pkw - poh
    elif kind == "H+":
        ph = -math.log10(positive_amount(value, "[H+] concentration"))
        if ph < 0 or ph > pkw:
            raise InvalidQuantityError(f"Calculated pH out of range (0-{pkw:g}). Check [H+] input.")
    elif kind == "OH-":
        poh = -math.log10(positive_amount(value, "[OH-] concentration"))
        if poh < 0 or poh > pkw:
            raise InvalidQuantityError(f"Calculated pOH out of range (0-{pkw:g}). Check [OH-] input.")
        ph = pkw - poh
    else:
        raise InvalidQuantityError(f"Unknown input type {kind!r}; expected one of {', '.join(INPUT_KINDS)}.")

    poh = pkw - ph
    return AcidityProfile(ph=ph, poh=poh, hydronium=10 ** -ph, hydroxide=10 ** -poh)
