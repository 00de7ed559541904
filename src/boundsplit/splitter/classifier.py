"""Decide whether a delimiter pattern can skip the regex engine.

A pattern qualifies for the literal fast path when it is either

1. a single character that has no special meaning in a regular
   expression, or
2. a backslash followed by one character that is not an ASCII letter or
   digit (``"\\,"``, ``"\\."``, ``"\\|"``) -- the escape makes it literal.

Surrogate code points (U+D800..U+DFFF) never qualify.  A Python ``str`` is
a sequence of code points, so an astral character such as an emoji is one
element and ``str.find`` cannot land inside it; a lone surrogate, however,
is half of a character and is left to :mod:`re`.
"""

from __future__ import annotations

from boundsplit.models import LiteralDelimiter, SplitRoute

REGEX_METACHARACTERS = ".$|()[{^?*+\\"
"""Characters that are special when they make up a whole pattern."""

_MIN_SURROGATE = 0xD800
_MAX_SURROGATE = 0xDFFF


def _is_ascii_alnum(ch: str) -> bool:
    return ("0" <= ch <= "9") or ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def _is_surrogate(ch: str) -> bool:
    return _MIN_SURROGATE <= ord(ch) <= _MAX_SURROGATE


def classify_delimiter(pattern: str) -> LiteralDelimiter | None:
    """Return the literal character *pattern* stands for, or ``None``.

    Examples
    --------
    >>> classify_delimiter(",")
    LiteralDelimiter(char=',', escaped=False)
    >>> classify_delimiter("\\\\.")
    LiteralDelimiter(char='.', escaped=True)
    >>> classify_delimiter(".") is None
    True
    >>> classify_delimiter("\\\\d") is None
    True
    """
    if len(pattern) == 1 and pattern not in REGEX_METACHARACTERS:
        candidate = LiteralDelimiter(pattern)
    elif len(pattern) == 2 and pattern[0] == "\\" and not _is_ascii_alnum(pattern[1]):
        candidate = LiteralDelimiter(pattern[1], escaped=True)
    else:
        return None

    if _is_surrogate(candidate.char):
        return None
    return candidate


def route_for(pattern: str, *, fast_path: bool = True) -> SplitRoute:
    """Return the strategy :func:`~boundsplit.splitter.split` would use."""
    if fast_path and classify_delimiter(pattern) is not None:
        return SplitRoute.LITERAL
    return SplitRoute.PATTERN
