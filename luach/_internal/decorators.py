"""Custom decorators for Luach.

This module provides decorator utilities for the library:
    - @memoize: Per-argument caching for pure calendar functions

This module is not part of the public API.
"""

from __future__ import annotations

import functools
from typing import Callable, TypeVar, ParamSpec

P = ParamSpec("P")
T = TypeVar("T")


def memoize(func: Callable[P, T]) -> Callable[P, T]:
    """Cache the results of a pure function keyed by its arguments.

    The Rosh Hashanah computation for a year is needed by every
    conversion that touches that year (and the next one, for year
    lengths), so caching it turns repeated molad arithmetic into a
    dictionary lookup.

    Note: Arguments must be hashable. Results are never evicted; the
    cache grows by one entry per distinct argument tuple.

    Args:
        func: The function to memoize.

    Returns:
        A memoized version of the function.

    Examples:
        >>> @memoize
        ... def elapsed(year: int) -> int:
        ...     return year * 354
    """
    cache: dict[tuple, T] = {}

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        key = (args, tuple(sorted(kwargs.items())))
        if key not in cache:
            cache[key] = func(*args, **kwargs)
        return cache[key]

    # Expose cache for testing/introspection
    wrapper._cache = cache  # type: ignore[attr-defined]
    wrapper._clear_cache = cache.clear  # type: ignore[attr-defined]
    return wrapper


__all__ = [
    "memoize",
]
