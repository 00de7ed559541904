"""Turn host values into the plain ``str`` / ``int`` the splitter expects.

Hosts hand :class:`~boundsplit.function.SplitFunction` whatever they store
internally: ``str``, raw UTF-8 ``bytes`` buffers, numbers.  These helpers
normalise them once, at the adapter boundary, so the splitting core only
ever sees ``str`` and ``int``.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any

from boundsplit.errors import SplitConversionError, SplitLimitError

# ASCII digits only; non-ASCII decimal digits are rejected.
_INT_RE = re.compile(r"[+-]?[0-9]+")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def to_text(value: Any) -> str | None:
    """Convert *value* to ``str``; ``None`` passes through.

    Raises
    ------
    SplitConversionError
        If *value* is bytes that are not valid UTF-8, or of a type with no
        text representation (lists, dicts, arbitrary objects).
    """
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SplitConversionError(
                f"value is not valid UTF-8: {exc.reason}",
                context={"value_type": type(value).__name__, "reason": str(exc)},
                cause=exc,
            ) from exc
    # bool before int: bool is an int subclass.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    raise SplitConversionError(
        f"cannot convert {type(value).__name__} to text",
        context={"value_type": type(value).__name__, "reason": "unsupported type"},
    )


def parse_limit(value: Any) -> int:
    """Parse the optional third ``split`` argument.

    Integers are taken as is; everything else is converted with
    :func:`to_text` and must then be a plain decimal integer (optional
    sign, no whitespace).  The result must fit in a signed 32-bit integer.

    Raises
    ------
    SplitLimitError
        If the value is not such an integer.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        limit = value
    else:
        text = to_text(value)
        if text is None or not _INT_RE.fullmatch(text):
            raise SplitLimitError(
                f"For input string: {text!r}",
                context={"value": text},
            )
        limit = int(text)

    if not INT32_MIN <= limit <= INT32_MAX:
        raise SplitLimitError(
            f"limit {limit} is outside the 32-bit integer range",
            context={"value": limit},
        )
    return limit
