"""Chemical formula parsing and formatting.

`parse_formula` turns strings such as ``"Ca(OH)2"`` or ``"K4Fe(CN)6"`` into
element counts. Parentheses nest to any depth and a numeral after a closing
parenthesis multiplies every element of the group.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from sciverse.errors import ParseError

logger = logging.getLogger(__name__)


class _FormulaScanner:
    """Left-to-right scanner holding the group stack and pending tokens."""

    def __init__(self, formula: str) -> None:
        self.formula = formula
        self.stack: List[Dict[str, int]] = [{}]
        self.symbol = ""
        self.numeral = ""
        self.closed_group: Optional[Dict[str, int]] = None

    def error(self, message: str, position: int) -> ParseError:
        return ParseError(
            f"{message} at position {position} in formula '{self.formula}'",
            formula=self.formula,
            position=position,
        )

    def flush(self, position: int) -> None:
        """Apply the pending numeral (default 1) to the pending symbol or group."""
        if not self.symbol and self.closed_group is None:
            return
        count = int(self.numeral) if self.numeral else 1
        if count == 0:
            raise self.error("Zero multiplier", position)

        top = self.stack[-1]
        if self.symbol:
            top[self.symbol] = top.get(self.symbol, 0) + count
        else:
            for element, inner in self.closed_group.items():
                top[element] = top.get(element, 0) + inner * count

        self.symbol = ""
        self.numeral = ""
        self.closed_group = None

    def feed(self, position: int, char: str) -> None:
        if "A" <= char <= "Z":
            self.flush(position)
            self.symbol = char
        elif "a" <= char <= "z":
            if not self.symbol or self.numeral:
                raise self.error(f"Lowercase letter '{char}' without preceding uppercase letter", position)
            self.symbol += char
        elif "0" <= char <= "9":
            if not self.symbol and self.closed_group is None:
                raise self.error(f"Number '{char}' appears unexpectedly", position)
            self.numeral += char
        elif char == "(":
            self.flush(position)
            self.stack.append({})
        elif char == ")":
            self.flush(position)
            if len(self.stack) == 1:
                raise self.error("Mismatched closing parenthesis", position)
            group = self.stack.pop()
            if not group:
                raise self.error("Empty parenthesis group", position)
            self.closed_group = group
        else:
            raise self.error(f"Invalid character '{char}'", position)

    def finish(self) -> Dict[str, int]:
        end = len(self.formula)
        self.flush(end)
        if len(self.stack) != 1:
            raise self.error("Mismatched opening parenthesis", end)
        return self.stack[0]


def parse_formula(formula: str) -> Mapping[str, int]:
    """Parse a chemical formula into element counts.

    Args:
        formula: Formula string such as ``"C6H12O6"`` or ``"Ca(OH)2"``.

    Returns:
        Read-only mapping of element symbol -> positive count, in the order
        each element first appears.

    Raises:
        ParseError: On any character outside ``[A-Za-z0-9()]``, misplaced
            lowercase letters or digits, zero multipliers, empty groups, or
            unbalanced parentheses.
    """
    if not isinstance(formula, str) or not formula.strip():
        raise ParseError("Chemical formula is required.", formula=str(formula or ""))

    text = formula.strip()
    scanner = _FormulaScanner(text)
    for position, char in enumerate(text):
        scanner.feed(position, char)
    counts = scanner.finish()

    logger.debug("Parsed formula %s -> %s", text, counts)
    return MappingProxyType(counts)


def format_formula(counts: Mapping[str, int]) -> str:
    """Format element counts using Hill order (C, H, then alphabetical).

    Args:
        counts: Mapping of element symbol -> count.

    Returns:
        Formula string (e.g. ``"C6H6O"``); counts of 1 are omitted and
        non-positive counts are skipped.
    """
    if not counts:
        return ""
    order = []
    if "C" in counts:
        order.append("C")
        if "H" in counts:
            order.append("H")
    order.extend(sorted(e for e in counts if e not in order))

    parts = []
    for element in order:
        count = counts[element]
        if count <= 0:
            continue
        parts.append(element if count == 1 else f"{element}{count}")
    return "".join(parts)
