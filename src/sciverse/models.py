"""Data structures for quantities and parsed equations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping

from sciverse.errors import InvalidQuantityError


class Unit(Enum):
    GRAMS = "grams"
    MOLES = "moles"

    @property
    def symbol(self) -> str:
        return "g" if self is Unit.GRAMS else "mol"

    @classmethod
    def parse(cls, value: Unit | str) -> Unit:
        """Accept a `Unit`, its value ("grams") or its symbol ("g")."""
        if isinstance(value, Unit):
            return value
        text = str(value).strip().lower()
        for unit in cls:
            if text in (unit.value, unit.symbol):
                return unit
        raise InvalidQuantityError(f"Unsupported unit: {value!r} (expected grams or moles)")


@dataclass(frozen=True)
class Quantity:
    value: float
    unit: Unit

    @property
    def symbol(self) -> str:
        return self.unit.symbol


@dataclass(frozen=True)
class ParsedEquation:
    """Substance -> coefficient mappings for both sides of a reaction."""

    reactants: Mapping[str, int]
    products: Mapping[str, int]

    def __post_init__(self) -> None:
        object.__setattr__(self, "reactants", MappingProxyType(dict(self.reactants)))
        object.__setattr__(self, "products", MappingProxyType(dict(self.products)))

    def coefficients(self) -> Dict[str, int]:
        # A species on both sides resolves to its product coefficient.
        combined = dict(self.reactants)
        combined.update(self.products)
        return combined

    def substances(self) -> List[str]:
        return list(self.reactants) + [s for s in self.products if s not in self.reactants]


@dataclass(frozen=True)
class CalculatedValue:
    name: str
    value: float
    unit: str = ""
