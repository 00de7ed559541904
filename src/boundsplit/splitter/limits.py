"""Limit semantics shared by both split strategies.

A limit falls into one of three zones:

* ``limit > 0`` -- at most *limit* parts; the last part absorbs the rest.
* ``limit == 0`` -- unbounded, trailing empty parts are dropped.
* ``limit < 0`` -- unbounded, trailing empty parts are kept.
"""

from __future__ import annotations

UNLIMITED = -1
"""Default limit: no bound, trailing empty parts preserved."""


def is_limited(limit: int) -> bool:
    return limit > 0


def truncate_trailing_empty(parts: list[str], limit: int) -> list[str]:
    """Drop trailing empty strings from *parts* when *limit* is zero.

    *parts* is modified in place and returned.
    """
    if limit == 0:
        while parts and not parts[-1]:
            parts.pop()
    return parts
