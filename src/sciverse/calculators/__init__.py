"""Closed-form chemistry calculators."""

from sciverse.calculators.acidity import AcidityProfile, acidity_profile
from sciverse.calculators.concentration import dilution, molality, molarity
from sciverse.calculators.empirical import EmpiricalFormula, empirical_formula
from sciverse.calculators.gas_laws import combined_gas, ideal_gas
from sciverse.calculators.kinetics import first_order, half_life
from sciverse.calculators.moles import MoleConversion, mole_conversions

__all__ = [
    "AcidityProfile",
    "acidity_profile",
    "dilution",
    "molality",
    "molarity",
    "EmpiricalFormula",
    "empirical_formula",
    "combined_gas",
    "ideal_gas",
    "first_order",
    "half_life",
    "MoleConversion",
    "mole_conversions",
]
