"""
Exceptions raised for programmer errors.

Validation failures are never raised; they come back as Invalid values. The
exceptions here signal that a rule was wired up or invoked incorrectly.
"""

from typing import Any, Iterable


class VettedError(Exception):
    """Base class for vetted programmer errors."""


class RecordMismatchError(VettedError, KeyError):
    """A record's keys do not match the keys of the rule record applied to it."""

    def __init__(self, missing: Iterable[Any], unexpected: Iterable[Any]):
        self.missing = tuple(missing)
        self.unexpected = tuple(unexpected)
        parts = []
        if self.missing:
            parts.append(f"missing keys {list(self.missing)}")
        if self.unexpected:
            parts.append(f"unexpected keys {list(self.unexpected)}")
        super().__init__(f"Record does not match rule record: {', '.join(parts)}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class ArityMismatchError(VettedError, ValueError):
    """A positional input has a different length than its rule sequence."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} items, got {actual}")
