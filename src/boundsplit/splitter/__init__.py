"""Bounded string splitting.

:func:`split` classifies the delimiter pattern, then hands the work to the
literal scanner or to the regular-expression splitter.  Both strategies
honour the same limit zones (see :mod:`boundsplit.splitter.limits`) and
produce identical results for any pattern the classifier accepts.
"""

from __future__ import annotations

from boundsplit.splitter.classifier import (
    REGEX_METACHARACTERS,
    classify_delimiter,
    route_for,
)
from boundsplit.splitter.limits import UNLIMITED, is_limited, truncate_trailing_empty
from boundsplit.splitter.literal import split_literal
from boundsplit.splitter.pattern import split_pattern


def split(
    text: str,
    pattern: str,
    limit: int = UNLIMITED,
    *,
    fast_path: bool = True,
) -> list[str]:
    """Split *text* around occurrences of *pattern*.

    Parameters
    ----------
    text:
        The string to partition.
    pattern:
        A regular expression.  Single safe characters and backslash-escaped
        punctuation are matched literally without compiling a regex.
    limit:
        ``> 0`` bounds the number of parts (the last one absorbs the
        remainder), ``0`` drops trailing empty parts, ``< 0`` keeps all.
    fast_path:
        Set to ``False`` to send every pattern through :mod:`re`.

    Raises
    ------
    re.error
        If *pattern* is not a valid regular expression.

    Examples
    --------
    >>> split("oneAtwoBthreeC", "[ABC]", 2)
    ['one', 'twoBthreeC']
    >>> split("a,b,,c", ",")
    ['a', 'b', '', 'c']
    >>> split("", ",", 0)
    []
    """
    if fast_path:
        delimiter = classify_delimiter(pattern)
        if delimiter is not None:
            return split_literal(text, delimiter.char, limit)
    return split_pattern(text, pattern, limit)


__all__ = [
    "REGEX_METACHARACTERS",
    "UNLIMITED",
    "classify_delimiter",
    "is_limited",
    "route_for",
    "split",
    "split_literal",
    "split_pattern",
    "truncate_trailing_empty",
]
