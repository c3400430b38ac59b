"""Equation balancing backed by chempy."""

from __future__ import annotations

import logging

from chempy import balance_stoichiometry

from sciverse.elements import ATOMIC_WEIGHTS
from sciverse.equation import format_equation, parse_equation
from sciverse.errors import BalanceError, UnsupportedElementError
from sciverse.formula import parse_formula
from sciverse.models import ParsedEquation

logger = logging.getLogger(__name__)


def balance_equation(equation: str) -> str:
    """Balance a reaction equation.

    Coefficients already present in `equation` are ignored; only the set of
    substances on each side is handed to the balancer.

    Args:
        equation: Equation such as ``"H2 + O2 -> H2O"``.

    Returns:
        Balanced equation string with the input's substance order,
        e.g. ``"2H2 + O2 -> 2H2O"``.

    Raises:
        EquationFormatError: If the equation cannot be split into terms.
        ParseError: If a term is not a valid formula.
        UnsupportedElementError: If a formula names an element outside the
            atomic weight table.
        BalanceError: If no unique balanced form exists.
    """
    parsed = parse_equation(equation)
    for substance in parsed.substances():
        for symbol in parse_formula(substance):
            if symbol not in ATOMIC_WEIGHTS:
                raise UnsupportedElementError(symbol)

    reactants = list(parsed.reactants)
    products = list(parsed.products)
    try:
        reac_bal, prod_bal = balance_stoichiometry(
            set(reactants), set(products), underdetermined=False
        )
    except ValueError as exc:
        raise BalanceError(f"Failed to balance the equation automatically: {exc}") from exc

    balanced = ParsedEquation(
        reactants={s: int(reac_bal[s]) for s in reactants},
        products={s: int(prod_bal[s]) for s in products},
    )
    coefficients = list(balanced.reactants.values()) + list(balanced.products.values())
    if any(c <= 0 for c in coefficients):
        raise BalanceError(f"Balancer returned a non-positive coefficient for {equation!r}")
    result = format_equation(balanced)
    logger.debug("Balanced %r -> %r", equation, result)
    return result
