"""Solution concentration: molarity, molality and dilution."""

from __future__ import annotations

from typing import Optional

from sciverse.errors import InvalidQuantityError
from sciverse.mass import formula_mass
from sciverse.models import CalculatedValue
from sciverse.validation import Number, positive_amount, single_missing


def _solute_moles(moles: Optional[Number], mass: Optional[Number], formula: Optional[str]) -> float:
    if (moles is None) == (mass is None):
        raise InvalidQuantityError("Provide either solute moles OR solute mass (with formula).")
    if moles is not None:
        return positive_amount(moles, "Solute amount")
    if not formula or not formula.strip():
        raise InvalidQuantityError("Chemical formula required when using solute mass.")
    return positive_amount(mass, "Solute mass") / formula_mass(formula)


def molarity(
    volume_l: Number,
    *,
    moles: Optional[Number] = None,
    mass: Optional[Number] = None,
    formula: Optional[str] = None,
) -> CalculatedValue:
    """Moles of solute per litre of solution."""
    volume = positive_amount(volume_l, "Solution volume")
    n = _solute_moles(moles, mass, formula)
    return CalculatedValue("Molarity", n / volume, "mol/L")


def molality(
    solvent_kg: Number,
    *,
    moles: Optional[Number] = None,
    mass: Optional[Number] = None,
    formula: Optional[str] = None,
) -> CalculatedValue:
    """Moles of solute per kilogram of solvent."""
    solvent = positive_amount(solvent_kg, "Solvent mass")
    n = _solute_moles(moles, mass, formula)
    return CalculatedValue("Molality", n / solvent, "mol/kg")


def dilution(
    m1: Optional[Number] = None,
    v1: Optional[Number] = None,
    m2: Optional[Number] = None,
    v2: Optional[Number] = None,
) -> CalculatedValue:
    """Solve M1·V1 = M2·V2 for the one value left as None."""
    values = {"M1": m1, "V1": v1, "M2": m2, "V2": v2}
    unknown = single_missing(values)
    known = {name: positive_amount(value, name) for name, value in values.items() if value is not None}

    if unknown == "M1":
        return CalculatedValue("M1", known["M2"] * known["V2"] / known["V1"], "mol/L")
    if unknown == "V1":
        return CalculatedValue("V1", known["M2"] * known["V2"] / known["M1"], "L")
    if unknown == "M2":
        return CalculatedValue("M2", known["M1"] * known["V1"] / known["V2"], "mol/L")
    return CalculatedValue("V2", known["M1"] * known["V1"] / known["M2"], "L")
