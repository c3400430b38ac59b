"""Reaction equation parsing.

Equations use ``->`` between reactants and products and ``+`` between terms,
e.g. ``"2H2 + O2 -> 2H2O"``. Coefficients are optional positive integers.
Balance is not verified here; see `sciverse.balancer`.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Mapping

from sciverse.errors import EquationFormatError
from sciverse.models import ParsedEquation

logger = logging.getLogger(__name__)

ARROW = "->"

_TERM_RE = re.compile(r"^(\d*)\s*([A-Z(][A-Za-z0-9()]*)$")


def _parse_side(side: str, label: str) -> Dict[str, int]:
    if not side.strip():
        raise EquationFormatError(f"Equation has no {label}.")

    terms: Dict[str, int] = {}
    for raw in side.split("+"):
        term = raw.strip()
        match = _TERM_RE.match(term)
        if not match:
            raise EquationFormatError(f'Invalid term format: "{term}"')
        coefficient = int(match.group(1) or "1")
        formula = match.group(2)
        if coefficient <= 0:
            raise EquationFormatError(f"Invalid coefficient for {formula}")
        if formula in terms:
            raise EquationFormatError(f"Formula {formula} appears multiple times on the same side.")
        terms[formula] = coefficient
    return terms


def parse_equation(equation: str) -> ParsedEquation:
    """Split an equation into reactant and product coefficient mappings.

    Raises:
        EquationFormatError: If the arrow is missing or repeated, a side or
            term is empty or malformed, a coefficient is zero, or a formula
            repeats on one side.
    """
    if not isinstance(equation, str) or not equation.strip():
        raise EquationFormatError("Chemical equation is required.")

    arrows = equation.count(ARROW)
    if arrows != 1:
        raise EquationFormatError(
            f"Invalid equation format: expected exactly one '{ARROW}', found {arrows}."
        )

    left, right = equation.split(ARROW)
    parsed = ParsedEquation(
        reactants=_parse_side(left, "reactants"),
        products=_parse_side(right, "products"),
    )
    logger.debug("Parsed equation %r -> %s", equation, parsed)
    return parsed


def _format_side(terms: Mapping[str, int]) -> str:
    return " + ".join(
        formula if coefficient == 1 else f"{coefficient}{formula}"
        for formula, coefficient in terms.items()
    )


def format_equation(equation: ParsedEquation) -> str:
    return f"{_format_side(equation.reactants)} {ARROW} {_format_side(equation.products)}"
