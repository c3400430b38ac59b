"""Physical constants shared by the calculators."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PhysicalConstants:
    """Read-only set of constants injected into the calculators.

    Attributes:
        avogadro: Avogadro's number (1/mol).
        molar_volume_stp: Molar volume of an ideal gas at STP (L/mol).
        gas_constant: Universal gas constant (J/(mol·K)).
        gas_constant_latm: Gas constant in L·atm/(mol·K).
        pkw: Ion product of water as -log10(Kw) at 25 °C.
    """

    avogadro: float = 6.02214076e23
    molar_volume_stp: float = 22.4
    gas_constant: float = 8.314462618
    gas_constant_latm: float = 0.0821
    pkw: float = 14.0


DEFAULT_CONSTANTS = PhysicalConstants()
