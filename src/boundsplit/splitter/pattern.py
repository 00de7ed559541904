"""Regular-expression split with host limit semantics.

:func:`re.split` is close to what ``split`` needs but differs in three
ways, so matching is delegated to :meth:`re.Pattern.finditer` and the parts
are assembled here:

* ``re.split`` inserts capture-group text into the result; ``split`` never
  does.
* ``re.split`` reports a leading empty part for a zero-width match at
  position 0; ``split`` does not (a positive-width match at position 0
  still yields one).
* ``maxsplit`` counts splits and treats 0 as "unbounded"; ``split`` counts
  parts and reserves 0 for trimming trailing empties.
"""

from __future__ import annotations

import re

from boundsplit.splitter.limits import is_limited, truncate_trailing_empty


def split_pattern(text: str, pattern: str, limit: int) -> list[str]:
    """Split *text* around matches of the regular expression *pattern*.

    Parameters
    ----------
    text:
        The string to partition.
    pattern:
        A :mod:`re` pattern.  May be empty, in which case *text* is split
        between every character.
    limit:
        Same three-zone convention as
        :func:`~boundsplit.splitter.literal.split_literal`.

    Raises
    ------
    re.error
        If *pattern* does not compile.  Propagated unchanged.

    Examples
    --------
    >>> split_pattern("oneAtwoBthreeC", "[ABC]", 2)
    ['one', 'twoBthreeC']
    >>> split_pattern("a1b22c", r"(\\d+)", -1)
    ['a', 'b', 'c']
    """
    compiled = re.compile(pattern)
    limited = is_limited(limit)
    parts: list[str] = []
    index = 0

    for match in compiled.finditer(text):
        start, end = match.span()
        if not limited or len(parts) < limit - 1:
            if index == 0 and start == 0 and end == 0:
                continue
            parts.append(text[index:start])
            index = end
        else:
            parts.append(text[index:])
            index = end
            break

    if index == 0:
        return truncate_trailing_empty([text], limit)

    if not limited or len(parts) < limit:
        parts.append(text[index:])

    return truncate_trailing_empty(parts, limit)
