"""Empirical and molecular formulas from percent composition."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

import numpy as np

from sciverse.elements import ATOMIC_WEIGHTS
from sciverse.errors import InvalidQuantityError, UnsupportedElementError
from sciverse.formula import format_formula
from sciverse.mass import molar_mass
from sciverse.validation import Number, positive_amount

logger = logging.getLogger(__name__)

# Ratios closer than this to a whole number are treated as whole.
RATIO_TOLERANCE = 0.1


@dataclass(frozen=True)
class EmpiricalFormula:
    empirical: str
    empirical_mass: float
    molecular: Optional[str] = None
    multiplier: Optional[int] = None


def _is_whole(values: np.ndarray) -> bool:
    return bool(np.all(np.abs(values - np.round(values)) <= RATIO_TOLERANCE))


def empirical_formula(
    percentages: Mapping[str, Number],
    molecular_mass: Optional[Number] = None,
) -> EmpiricalFormula:
    """Find the empirical (and optionally molecular) formula.

    Args:
        percentages: Element symbol -> mass percent; must sum to ~100.
        molecular_mass: Measured molar mass (g/mol) of the compound.

    Returns:
        The empirical formula, its mass, and when `molecular_mass` is a
        near-whole multiple of that mass, the molecular formula.
    """
    if not percentages:
        raise InvalidQuantityError("At least one element required.")

    symbols = [symbol.strip() for symbol in percentages]
    if len(set(symbols)) != len(symbols):
        raise InvalidQuantityError("Each element may be listed only once.")
    for symbol in symbols:
        if symbol not in ATOMIC_WEIGHTS:
            raise UnsupportedElementError(symbol)
    percent = np.array([positive_amount(p, f"Percentage of {s}") for s, p in zip(symbols, percentages.values())])
    if np.any(percent > 100):
        raise InvalidQuantityError("Percentages must be > 0 and <= 100.")
    if abs(percent.sum() - 100.0) >= RATIO_TOLERANCE:
        raise InvalidQuantityError("Percentages must add up to approximately 100%.")

    # Moles per 100 g of sample, scaled so the smallest is 1.
    moles = percent / np.array([ATOMIC_WEIGHTS[s] for s in symbols])
    ratios = np.round(moles / moles.min(), 2)

    scale = 1
    if not _is_whole(ratios):
        for candidate in (2, 3, 4):
            if _is_whole(ratios * candidate):
                scale = candidate
                break
    counts = {s: int(round(r * scale)) for s, r in zip(symbols, ratios)}
    empirical_mass = molar_mass(counts)
    result = EmpiricalFormula(format_formula(counts), empirical_mass)

    if molecular_mass is None:
        return result

    ratio = positive_amount(molecular_mass, "Molecular mass") / empirical_mass
    n = int(round(ratio))
    if n < 1 or abs(n - ratio) > RATIO_TOLERANCE:
        logger.warning(
            "Molecular mass %s is not a multiple of empirical mass %.4f", molecular_mass, empirical_mass
        )
        return result
    molecular = format_formula({s: c * n for s, c in counts.items()})
    return EmpiricalFormula(result.empirical, empirical_mass, molecular, n)
