"""
Single-slot memoization for (value, *meta) functions.
"""

import logging
from functools import update_wrapper
from typing import Any, Callable, Sequence

logger = logging.getLogger(__name__)

Equality = Callable[[Any, Any], bool]


def identical_or_equal(left: Any, right: Any) -> bool:
    """Default equality: same object, or equal by value and of the same type."""
    return left is right or (type(left) is type(right) and left == right)


class Memoized:
    """
    A function wrapper remembering only its most recent call.

    A call is answered from the cache when the value matches the cached
    value under `equality` and every meta argument matches under the
    equality at the same position in `meta_equalities` (missing or None
    entries fall back to identical_or_equal). Meta tuples of different
    lengths never match. Anything else calls through and replaces the slot.

    Not thread-safe: the slot is shared by every caller of this wrapper.
    Use fork() to give each logical caller its own slot.
    """

    def __init__(
        self,
        fn: Callable[..., Any],
        equality: Equality | None = None,
        meta_equalities: Sequence[Equality | None] = (),
    ):
        self.fn = fn
        self.equality = equality
        self.meta_equalities = tuple(meta_equalities)
        self._last_call: tuple[Any, tuple, Any] | None = None
        update_wrapper(self, fn, updated=())

    def __call__(self, value: Any, *meta: Any) -> Any:
        if self._last_call is not None:
            last_value, last_meta, result = self._last_call
            if self._value_equal(last_value, value) and self._meta_equal(last_meta, meta):
                logger.debug("memoize hit for %r", self.fn)
                return result

        logger.debug("memoize miss for %r", self.fn)
        result = self.fn(value, *meta)
        self._last_call = (value, meta, result)
        return result

    def fork(self) -> "Memoized":
        """A new wrapper over the same function and equalities, with an empty slot."""
        logger.debug("memoize fork of %r", self.fn)
        return Memoized(self.fn, self.equality, self.meta_equalities)

    def clear(self) -> None:
        self._last_call = None

    def _value_equal(self, left: Any, right: Any) -> bool:
        return (self.equality or identical_or_equal)(left, right)

    def _meta_equal(self, lefts: tuple, rights: tuple) -> bool:
        if len(lefts) != len(rights):
            return False

        for index, (left, right) in enumerate(zip(lefts, rights)):
            equality = None
            if index < len(self.meta_equalities):
                equality = self.meta_equalities[index]
            if not (equality or identical_or_equal)(left, right):
                return False
        return True

    def __repr__(self) -> str:
        return f"Memoized({self.fn!r})"


def memoize(
    _func: Callable[..., Any] | None = None,
    *,
    equality: Equality | None = None,
    meta_equalities: Sequence[Equality | None] = (),
) -> Any:
    """
    Wrap a function in a single-slot cache.

    Can be used directly or as a decorator, with or without arguments:
        cached = memoize(check_user)

        @memoize
        def check_user(user, locale): ...

        @memoize(equality=lambda a, b: a["id"] == b["id"])
        def check_user(user, locale): ...

    Args:
        equality: Compares the primary argument with the cached one.
        meta_equalities: Per-position comparisons for the meta arguments.

    Returns:
        A Memoized wrapper, or a decorator producing one.
    """

    def decorator(func: Callable[..., Any]) -> Memoized:
        return Memoized(func, equality=equality, meta_equalities=meta_equalities)

    # Handle both @memoize and @memoize(...) syntax
    if _func is not None:
        return decorator(_func)
    return decorator
