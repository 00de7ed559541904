"""Public data models for boundsplit.

All types are plain frozen dataclasses or string enums with no behaviour
beyond what is needed for structural equality and hashing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SplitRoute(str, Enum):
    """Which strategy handled a split call."""

    LITERAL = "literal"
    """Hand-rolled scan for a single fixed character."""

    PATTERN = "pattern"
    """Regular-expression matching via :mod:`re`."""


@dataclass(frozen=True)
class LiteralDelimiter:
    """A delimiter pattern that reduces to one literal character.

    Attributes
    ----------
    char:
        The single character to scan for.
    escaped:
        ``True`` when the pattern was written as a backslash escape
        (``"\\,"``) rather than the bare character (``","``).
    """

    char: str
    escaped: bool = False


@dataclass(frozen=True)
class FunctionDescription:
    """Help text for a host function, as shown by ``DESCRIBE FUNCTION``."""

    name: str
    usage: str
    extended: str = ""

    def render(self, *, extended: bool = False) -> str:
        """Return the usage line, optionally followed by the extended text."""
        text = self.usage.replace("_FUNC_", self.name)
        if extended and self.extended:
            text = f"{text}\n{self.extended.replace('_FUNC_', self.name)}"
        return text
