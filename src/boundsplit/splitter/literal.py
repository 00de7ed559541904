"""Single-character split without the regex engine."""

from __future__ import annotations

from boundsplit.splitter.limits import is_limited, truncate_trailing_empty


def split_literal(text: str, char: str, limit: int) -> list[str]:
    """Split *text* around every occurrence of *char*.

    Parameters
    ----------
    text:
        The string to partition.
    char:
        A single character, as returned by
        :func:`~boundsplit.splitter.classifier.classify_delimiter`.
    limit:
        Maximum number of parts when positive.  Zero drops trailing empty
        parts; a negative value keeps everything.

    Returns
    -------
    list[str]
        The parts in source order.  When the limit is reached the last part
        holds the whole unscanned remainder of *text*, delimiters included.

    Examples
    --------
    >>> split_literal("a,b,,c", ",", -1)
    ['a', 'b', '', 'c']
    >>> split_literal("a,b,,", ",", 0)
    ['a', 'b']
    >>> split_literal("aXbXcXd", "X", 2)
    ['a', 'bXcXd']
    """
    limited = is_limited(limit)
    parts: list[str] = []
    offset = 0

    nxt = text.find(char, offset)
    while nxt != -1:
        if not limited or len(parts) < limit - 1:
            parts.append(text[offset:nxt])
            offset = nxt + 1
        else:
            # Bound reached: the remainder of the source becomes the last part.
            parts.append(text[offset:])
            offset = len(text)
            break
        nxt = text.find(char, offset)

    if not parts:
        return truncate_trailing_empty([text], limit)

    if not limited or len(parts) < limit:
        parts.append(text[offset:])

    return truncate_trailing_empty(parts, limit)
