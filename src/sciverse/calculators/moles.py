"""Mole concept conversions between mass, moles, particles and gas volume."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sciverse.constants import DEFAULT_CONSTANTS, PhysicalConstants
from sciverse.errors import InvalidQuantityError
from sciverse.mass import formula_mass
from sciverse.validation import Number, non_negative_amount


@dataclass(frozen=True)
class MoleConversion:
    formula: str
    molar_mass: float  # g/mol
    moles: float  # mol
    mass: float  # g
    particles: float
    volume: float  # L at STP


def mole_conversions(
    formula: str,
    *,
    mass: Optional[Number] = None,
    moles: Optional[Number] = None,
    particles: Optional[Number] = None,
    volume: Optional[Number] = None,
    constants: PhysicalConstants = DEFAULT_CONSTANTS,
) -> MoleConversion:
    """Derive every mole-concept quantity from exactly one given quantity."""
    given = {
        name: value
        for name, value in (("mass", mass), ("moles", moles), ("particles", particles), ("volume", volume))
        if value is not None
    }
    if len(given) != 1:
        raise InvalidQuantityError(
            "Provide exactly one quantity (mass, moles, particles, or volume)."
        )
    (kind, raw), = given.items()
    value = non_negative_amount(raw, kind.capitalize())

    molar_mass = formula_mass(formula)
    if kind == "mass":
        n = value / molar_mass
    elif kind == "moles":
        n = value
    elif kind == "particles":
        n = value / constants.avogadro
    else:
        n = value / constants.molar_volume_stp

    return MoleConversion(
        formula=formula.strip(),
        molar_mass=molar_mass,
        moles=n,
        mass=n * molar_mass,
        particles=n * constants.avogadro,
        volume=n * constants.molar_volume_stp,
    )
