"""Molar mass calculation from element counts."""

from __future__ import annotations

import logging
from typing import Mapping

from sciverse.elements import ATOMIC_WEIGHTS
from sciverse.errors import UnsupportedElementError
from sciverse.formula import parse_formula

logger = logging.getLogger(__name__)


def molar_mass(counts: Mapping[str, int], weights: Mapping[str, float] = ATOMIC_WEIGHTS) -> float:
    """Calculate the molar mass of a parsed formula.

    Args:
        counts: Mapping of element symbol -> count.
        weights: Atomic weight table (g/mol).

    Returns:
        Molar mass in g/mol.

    Raises:
        UnsupportedElementError: For the first element missing from `weights`.
    """
    total = 0.0
    for element, count in counts.items():
        weight = weights.get(element)
        if weight is None:
            raise UnsupportedElementError(element)
        total += weight * count
    return total


def formula_mass(formula: str, weights: Mapping[str, float] = ATOMIC_WEIGHTS) -> float:
    """Parse `formula` and return its molar mass in g/mol."""
    mass = molar_mass(parse_formula(formula), weights)
    logger.debug("Molar mass of %s = %.5f g/mol", formula.strip(), mass)
    return mass
