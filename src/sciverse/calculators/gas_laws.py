"""Ideal and combined gas law solvers.

Units: pressure in atm, volume in L, amount in mol, temperature in K.
"""

from __future__ import annotations

from typing import Optional

from sciverse.constants import DEFAULT_CONSTANTS, PhysicalConstants
from sciverse.models import CalculatedValue
from sciverse.validation import Number, positive_amount, single_missing

_UNITS = {"P": "atm", "V": "L", "n": "mol", "T": "K"}


def ideal_gas(
    pressure: Optional[Number] = None,
    volume: Optional[Number] = None,
    moles: Optional[Number] = None,
    temperature: Optional[Number] = None,
    constants: PhysicalConstants = DEFAULT_CONSTANTS,
) -> CalculatedValue:
    """Solve PV = nRT for the one value left as None."""
    values = {"P": pressure, "V": volume, "n": moles, "T": temperature}
    unknown = single_missing(values)
    k = {name: positive_amount(value, name) for name, value in values.items() if value is not None}
    r = constants.gas_constant_latm

    if unknown == "P":
        result = k["n"] * r * k["T"] / k["V"]
    elif unknown == "V":
        result = k["n"] * r * k["T"] / k["P"]
    elif unknown == "n":
        result = k["P"] * k["V"] / (r * k["T"])
    else:
        result = k["P"] * k["V"] / (k["n"] * r)
    return CalculatedValue(unknown, result, _UNITS[unknown])


def combined_gas(
    p1: Optional[Number] = None,
    v1: Optional[Number] = None,
    t1: Optional[Number] = None,
    p2: Optional[Number] = None,
    v2: Optional[Number] = None,
    t2: Optional[Number] = None,
) -> CalculatedValue:
    """Solve P1·V1/T1 = P2·V2/T2 for the one value left as None."""
    values = {"P1": p1, "V1": v1, "T1": t1, "P2": p2, "V2": v2, "T2": t2}
    unknown = single_missing(values)
    k = {name: positive_amount(value, name) for name, value in values.items() if value is not None}

    if unknown == "P1":
        result = k["P2"] * k["V2"] * k["T1"] / (k["V1"] * k["T2"])
    elif unknown == "V1":
        result = k["P2"] * k["V2"] * k["T1"] / (k["P1"] * k["T2"])
    elif unknown == "T1":
        result = k["P1"] * k["V1"] * k["T2"] / (k["P2"] * k["V2"])
    elif unknown == "P2":
        result = k["P1"] * k["V1"] * k["T2"] / (k["V2"] * k["T1"])
    elif unknown == "V2":
        result = k["P1"] * k["V1"] * k["T2"] / (k["P2"] * k["T1"])
    else:
        result = k["P2"] * k["V2"] * k["T1"] / (k["P1"] * k["V1"])

    return CalculatedValue(unknown, result, _UNITS[unknown[0]])
