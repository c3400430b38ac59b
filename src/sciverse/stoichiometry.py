"""Mole-ratio stoichiometry.

Given a balanced equation, an amount of one substance and a target
substance, `resolve_quantity` computes how much of the target takes part:

    n_known  = m_known / M_known        (or the given moles)
    n_target = n_known * nu_target / nu_known
    m_target = n_target * M_target      (or n_target for moles)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from sciverse.balancer import balance_equation
from sciverse.equation import parse_equation
from sciverse.errors import InvalidQuantityError, SubstanceNotFoundError
from sciverse.mass import formula_mass
from sciverse.models import ParsedEquation, Quantity, Unit
from sciverse.validation import Number, format_amount, positive_amount

logger = logging.getLogger(__name__)


def resolve_quantity(
    equation: ParsedEquation,
    known: str,
    amount: Number,
    unit: Union[Unit, str],
    target: str,
    desired_unit: Union[Unit, str],
) -> Quantity:
    """Compute the amount of `target` matching `amount` of `known`.

    Args:
        equation: Parsed (ideally balanced) equation.
        known: Formula of the substance whose amount is given.
        amount: Given amount; must be positive.
        unit: Unit of `amount`.
        target: Formula of the substance to solve for.
        desired_unit: Unit of the returned quantity.

    Returns:
        The target quantity in `desired_unit`.

    Raises:
        InvalidQuantityError: For non-positive input or result.
        SubstanceNotFoundError: If `known` or `target` is not in the equation.
        ParseError, UnsupportedElementError: If a molar mass is needed and
            the formula cannot be evaluated.
    """
    given = positive_amount(amount, "Known quantity")
    unit = Unit.parse(unit)
    desired_unit = Unit.parse(desired_unit)

    known = known.strip()
    target = target.strip()
    coefficients = equation.coefficients()
    if known not in coefficients:
        raise SubstanceNotFoundError(known, role="Known substance")
    if target not in coefficients:
        raise SubstanceNotFoundError(target, role="Unknown substance")

    if unit is Unit.GRAMS:
        known_moles = given / formula_mass(known)
    else:
        known_moles = given
    if known_moles <= 0:
        raise InvalidQuantityError("Known quantity must result in positive moles.")

    target_moles = known_moles * (coefficients[target] / coefficients[known])

    if desired_unit is Unit.GRAMS:
        result = target_moles * formula_mass(target)
    else:
        result = target_moles
    if result <= 0:
        raise InvalidQuantityError("Calculation resulted in non-positive amount.")

    logger.debug(
        "%s %s %s -> %.6f mol %s -> %s %s",
        given, unit.symbol, known, target_moles, target, result, desired_unit.symbol,
    )
    return Quantity(result, desired_unit)


@dataclass(frozen=True)
class StoichiometryResult:
    equation: str
    target: str
    quantity: Quantity

    def describe(self) -> str:
        return f"{format_amount(self.quantity.value)} {self.quantity.symbol} of {self.target}"


def calculate_stoichiometry(
    equation: str,
    known: str,
    amount: Number,
    unit: Union[Unit, str],
    target: str,
    desired_unit: Union[Unit, str],
    balance: bool = True,
) -> StoichiometryResult:
    """Balance (optionally), parse and resolve one stoichiometry question."""
    text = balance_equation(equation) if balance else equation.strip()
    parsed = parse_equation(text)
    quantity = resolve_quantity(parsed, known, amount, unit, target, desired_unit)
    return StoichiometryResult(equation=text, target=target.strip(), quantity=quantity)
