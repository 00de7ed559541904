"""boundsplit: bounded string splitting with a literal fast path.

Public re-exports
-----------------

* **Core:** :func:`split`, :func:`classify_delimiter`, :func:`route_for`,
  :func:`split_literal`, :func:`split_pattern`, :data:`UNLIMITED`
* **Host function:** :class:`SplitFunction`
* **Configuration:** :class:`SplitConfig`
* **Errors:** Every :class:`BoundSplitError` subclass and :class:`ErrorCode`
* **Models:** :class:`SplitRoute`, :class:`LiteralDelimiter`,
  :class:`FunctionDescription`

Usage::

    from boundsplit import split

    split("a,b,,c", ",")          # ['a', 'b', '', 'c']
    split("a,b,,", ",", 0)        # ['a', 'b']
    split("oneAtwoBthreeC", "[ABC]", 2)   # ['one', 'twoBthreeC']
"""

from __future__ import annotations

# ── Coercion ───────────────────────────────────────────────────────────
from boundsplit.coerce import parse_limit, to_text

# ── Configuration ───────────────────────────────────────────────────────
from boundsplit.config import SplitConfig

# ── Errors ──────────────────────────────────────────────────────────────
from boundsplit.errors import (
    BoundSplitError,
    ErrorCode,
    SplitArgumentLengthError,
    SplitConversionError,
    SplitEvaluationError,
    SplitLimitError,
)

# ── Host function ───────────────────────────────────────────────────────
from boundsplit.function import SplitFunction

# ── Models ──────────────────────────────────────────────────────────────
from boundsplit.models import FunctionDescription, LiteralDelimiter, SplitRoute

# ── Core ────────────────────────────────────────────────────────────────
from boundsplit.splitter import (
    UNLIMITED,
    classify_delimiter,
    route_for,
    split,
    split_literal,
    split_pattern,
)

__all__ = [
    # Core
    "split",
    "split_literal",
    "split_pattern",
    "classify_delimiter",
    "route_for",
    "UNLIMITED",
    # Host function
    "SplitFunction",
    "to_text",
    "parse_limit",
    # Configuration
    "SplitConfig",
    # Errors
    "BoundSplitError",
    "ErrorCode",
    "SplitArgumentLengthError",
    "SplitConversionError",
    "SplitLimitError",
    "SplitEvaluationError",
    # Models
    "SplitRoute",
    "LiteralDelimiter",
    "FunctionDescription",
]
