"""Error hierarchy for boundsplit.

Every public error class inherits from BoundSplitError. Each carries a
machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).

The splitting core itself raises nothing from this module: a malformed
regular expression surfaces as :class:`re.error` straight from :mod:`re`.
These classes are raised by the host-function adapter
(:mod:`boundsplit.function`) and the value coercion helpers
(:mod:`boundsplit.coerce`).
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error the package can raise."""

    ARGUMENT_LENGTH_ERROR = "ARGUMENT_LENGTH_ERROR"
    CONVERSION_ERROR = "CONVERSION_ERROR"
    LIMIT_PARSE_ERROR = "LIMIT_PARSE_ERROR"
    EVALUATION_ERROR = "EVALUATION_ERROR"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class BoundSplitError(Exception):
    """Base exception for all boundsplit errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
        Keys and expected types are documented per subclass.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Argument errors
# ---------------------------------------------------------------------------

class SplitArgumentLengthError(BoundSplitError):
    """The function was invoked with a number of arguments other than 2 or 3.

    Context keys: ``arg_count``, ``min_args``, ``max_args``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.ARGUMENT_LENGTH_ERROR,
            message=message,
            context=context,
            cause=cause,
        )


class SplitConversionError(BoundSplitError):
    """A host value could not be turned into plain text.

    Context keys: ``value_type``, ``reason``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.CONVERSION_ERROR,
            message=message,
            context=context,
            cause=cause,
        )


class SplitLimitError(BoundSplitError):
    """The limit argument is not a valid 32-bit integer.

    Context keys: ``value``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.LIMIT_PARSE_ERROR,
            message=message,
            context=context,
            cause=cause,
        )


# ---------------------------------------------------------------------------
# Evaluation errors
# ---------------------------------------------------------------------------

class SplitEvaluationError(BoundSplitError):
    """Evaluating ``split`` failed.

    Wraps whatever went wrong underneath (a bad limit, an unconvertible
    value, a malformed pattern) so that callers only need to catch one
    type.  The message is the underlying message followed by the formatted
    traceback of the cause.

    Context keys: ``error_code`` (code of a wrapped :class:`BoundSplitError`,
    if any), ``error_type``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.EVALUATION_ERROR,
            message=message,
            context=context,
            cause=cause,
        )
