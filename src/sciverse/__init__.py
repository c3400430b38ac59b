"""SciVerse chemistry core package."""

from sciverse.balancer import balance_equation
from sciverse.constants import DEFAULT_CONSTANTS, PhysicalConstants
from sciverse.equation import format_equation, parse_equation
from sciverse.errors import (
    BalanceError,
    EquationFormatError,
    InvalidQuantityError,
    ParseError,
    SciVerseError,
    SubstanceNotFoundError,
    UnsupportedElementError,
)
from sciverse.formula import format_formula, parse_formula
from sciverse.mass import formula_mass, molar_mass
from sciverse.models import CalculatedValue, ParsedEquation, Quantity, Unit
from sciverse.stoichiometry import StoichiometryResult, calculate_stoichiometry, resolve_quantity

__all__ = [
    "balance_equation",
    "DEFAULT_CONSTANTS",
    "PhysicalConstants",
    "format_equation",
    "parse_equation",
    "BalanceError",
    "EquationFormatError",
    "InvalidQuantityError",
    "ParseError",
    "SciVerseError",
    "SubstanceNotFoundError",
    "UnsupportedElementError",
    "format_formula",
    "parse_formula",
    "formula_mass",
    "molar_mass",
    "CalculatedValue",
    "ParsedEquation",
    "Quantity",
    "Unit",
    "StoichiometryResult",
    "calculate_stoichiometry",
    "resolve_quantity",
]
