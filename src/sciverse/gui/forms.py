"""Form state and submit handlers for the GUI layer.

Each form moves idle -> loading -> done; a finished form carries either a
result text or an error message, never both.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from sciverse.calculators import acidity_profile
from sciverse.errors import SciVerseError
from sciverse.mass import formula_mass
from sciverse.stoichiometry import calculate_stoichiometry
from sciverse.validation import format_amount

logger = logging.getLogger(__name__)


class Status(Enum):
    IDLE = "idle"
    LOADING = "loading"
    DONE = "done"


@dataclass(frozen=True)
class FormState:
    status: Status = Status.IDLE
    result: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def loading(cls) -> FormState:
        return cls(Status.LOADING)

    @property
    def ok(self) -> bool:
        return self.status is Status.DONE and self.error is None


def submit(calculation: Callable[[], str]) -> FormState:
    """Run `calculation` and capture its text or its error message."""
    try:
        text = calculation()
    except SciVerseError as exc:
        logger.info("Calculation failed: %s", exc)
        return FormState(Status.DONE, error=f"Calculation failed: {exc}")
    return FormState(Status.DONE, result=text)


def molar_mass_form(formula: str) -> FormState:
    return submit(lambda: f"{format_amount(formula_mass(formula), 4)} g/mol")


def stoichiometry_form(
    equation: str,
    known: str,
    amount: str,
    unit: str,
    target: str,
    desired_unit: str,
) -> FormState:
    def calculation() -> str:
        result = calculate_stoichiometry(equation, known, amount, unit, target, desired_unit)
        return f"{result.equation}\n{result.describe()}"

    return submit(calculation)


def acidity_form(value: str, kind: str) -> FormState:
    def calculation() -> str:
        profile = acidity_profile(value, kind)
        return (
            f"pH {profile.ph:.2f}   pOH {profile.poh:.2f}\n"
            f"[H+] {profile.hydronium:.3e} M   [OH-] {profile.hydroxide:.3e} M"
        )

    return submit(calculation)
