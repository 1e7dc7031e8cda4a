"""
Result types for vetted.

Provides the Validated sum type (Valid | Invalid), its combinators, and the
positional/keyed aggregation helpers used by the rule combinators.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, NoReturn, TypeVar

from .lib.record_helpers import keys

A = TypeVar("A")
B = TypeVar("B")
E = TypeVar("E")
F = TypeVar("F")
K = TypeVar("K", bound=Hashable)


class Validated(Generic[E, A]):
    """
    Outcome of a validation: exactly one of Valid(value) or Invalid(error).

    Valid and Invalid are the only variants. Every combinator is written in
    terms of fold(), which is the single place that inspects the variant.
    """

    __slots__ = ()

    def fold(self, on_ok: Callable[[A], B], on_error: Callable[[E], B]) -> B:
        match self:
            case Valid(value):
                return on_ok(value)
            case Invalid(err):
                return on_error(err)
        _unreachable(self)

    def is_valid(self) -> bool:
        return self.fold(lambda _: True, lambda _: False)

    def is_invalid(self) -> bool:
        return not self.is_valid()

    def map(self, f: Callable[[A], B]) -> Validated[E, B]:
        return self.fold(lambda a: ok(f(a)), error)

    def map_error(self, f: Callable[[E], F]) -> Validated[F, A]:
        return self.fold(ok, lambda e: error(f(e)))

    def flat_map(self, f: Callable[[A], Validated[F, B]]) -> Validated[E | F, B]:
        """Feed the value into f; an Invalid is passed through untouched."""
        return self.fold(f, error)

    def filter(
        self, pred: Callable[[A], bool], to_error: Callable[[A], F]
    ) -> Validated[E | F, A]:
        return self.fold(
            lambda a: ok(a) if pred(a) else error(to_error(a)),
            error,
        )

    def test(self, *predicates: Callable[[A], Validated[F, Any]]) -> Validated[E | list[F], A]:
        """
        Check a valid value against every predicate.

        All predicates run, even after one fails. The failures are collected
        in declared order into a single Invalid(list); if none fail the
        original Valid is returned.
        """

        def run_all(a: A) -> Validated[list[F], A]:
            failures: list[F] = []
            for predicate in predicates:
                predicate(a).fold(lambda _: None, failures.append)
            return error(failures) if failures else self  # type: ignore[return-value]

        return self.fold(run_all, error)

    def recover(self, f: Callable[[E], B]) -> Valid[A | B]:
        """Turn an Invalid into a Valid fallback; the result never fails."""
        return self.fold(ok, lambda e: ok(f(e)))

    def or_else(self, alternative: Validated[F, B]) -> Validated[F, A | B]:
        return self.fold(lambda _: self, lambda _: alternative)  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class Valid(Validated[Any, A]):
    """Success result containing a value."""

    value: A


@dataclass(frozen=True, slots=True)
class Invalid(Validated[E, Any]):
    """Failure result containing an error payload."""

    error: E


def _unreachable(v: object) -> NoReturn:
    raise TypeError(f"Validated must be Valid or Invalid, got {type(v).__name__}")


def ok(value: A = None) -> Valid[A]:  # type: ignore[assignment]
    """Wrap a value as Valid. With no argument, produces the bare success used by predicates."""
    return Valid(value)


def error(e: E) -> Invalid[E]:
    """
    Wrap an error payload as Invalid.

    Raises:
        ValueError: If e is None. None marks a passing position in
            aggregated error lists, so it cannot be an error itself.
    """
    if e is None:
        raise ValueError("None cannot be used as an error payload")
    return Invalid(e)


def sequence(validateds: Iterable[Validated[E, A]]) -> Validated[list[E | None], list[A]]:
    """
    Accumulate results positionally.

    Returns Valid(values) if every item is valid. Otherwise returns an
    Invalid error list of the same length as the input, holding None at
    positions that validated and the error at positions that did not.
    Error payloads must not be None, or a failure would read as a pass.
    """
    has_errors = False
    errors: list[E | None] = []
    values: list[A] = []

    for validated in validateds:
        match validated:
            case Valid(value):
                values.append(value)
                errors.append(None)
            case Invalid(err):
                errors.append(err)
                has_errors = True
            case _:
                _unreachable(validated)

    return error(errors) if has_errors else ok(values)


def combine(record: Mapping[K, Validated[E, A]]) -> Validated[dict[K, E], dict[K, A]]:
    """
    Accumulate results by key.

    Returns Valid of the value dict if every entry is valid, else Invalid of a
    dict holding only the keys that failed.
    """
    errors: dict[K, E] = {}
    values: dict[K, A] = {}

    for key in keys(record):
        match record[key]:
            case Valid(value):
                values[key] = value
            case Invalid(err):
                errors[key] = err
            case other:
                _unreachable(other)

    return error(errors) if errors else ok(values)
