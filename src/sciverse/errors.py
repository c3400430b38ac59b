"""Exceptions raised by the SciVerse chemistry core."""

from __future__ import annotations


class SciVerseError(ValueError):
    """Base class for every calculation error shown to the user."""


class ParseError(SciVerseError):
    """Raised when a chemical formula is syntactically malformed."""

    def __init__(self, message: str, formula: str = "", position: int | None = None):
        super().__init__(message)
        self.formula = formula
        self.position = position


class UnsupportedElementError(SciVerseError):
    """Raised when a formula names an element missing from the weight table."""

    def __init__(self, symbol: str):
        super().__init__(f"Atomic weight not available for element '{symbol}'")
        self.symbol = symbol


class EquationFormatError(SciVerseError):
    """Raised when a reaction equation cannot be split into its terms."""


class BalanceError(EquationFormatError):
    """Raised when the balancer cannot produce a unique balanced equation."""


class SubstanceNotFoundError(SciVerseError):
    """Raised when a requested substance does not take part in the equation."""

    def __init__(self, substance: str, role: str = "Substance"):
        super().__init__(f'{role} "{substance}" not found in the equation.')
        self.substance = substance


class InvalidQuantityError(SciVerseError):
    """Raised for non-positive, non-finite or otherwise unusable input values."""
