"""
Core rule class for vetted.

A ValidationRule wraps a function (value, *meta) -> Validated and provides
combinators for building larger rules out of smaller ones. The meta tuple is
passed positionally after the value and reaches every composed sub-rule
unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, Sequence, TypeVar

from .memoize import Equality, memoize
from .types import Validated, error, ok

P = TypeVar("P")
E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")
F = TypeVar("F")

IS_MISSING = "IS_MISSING"
IS_UNDEFINED = IS_MISSING

RuleFn = Callable[..., Validated[Any, Any]]


def _present(value: Any, *meta: Any) -> Validated[str, Any]:
    return error(IS_MISSING) if value is None else ok(value)


@dataclass(frozen=True, slots=True)
class ValidationRule(Generic[P, E, A]):
    """
    Immutable, reusable validator.

    Call it (or use apply) with the value and any meta arguments. Every
    combinator returns a new rule; the original is never changed.
    """

    fn: RuleFn

    def __call__(self, value: P, *meta: Any) -> Validated[E, A]:
        return self.fn(value, *meta)

    def apply(self, value: P, *meta: Any) -> Validated[E, A]:
        return self.fn(value, *meta)

    @staticmethod
    def create(fn: Callable[..., Validated[E, A]]) -> ValidationRule[Any, E, A]:
        """Wrap a (value, *meta) -> Validated function as a rule."""
        return ValidationRule(fn)

    @staticmethod
    def identity() -> ValidationRule[A, Any, A]:
        """A rule that accepts every value unchanged."""
        return ValidationRule(lambda value, *meta: ok(value))

    @staticmethod
    def combine(rules: Mapping[Any, ValidationRule]) -> ValidationRule:
        from .aggregate import combine

        return combine(rules)

    def compose(self, other: ValidationRule[A, F, B]) -> ValidationRule[P, E | F, B]:
        """
        Run self, then feed its value into other.

        other only runs when self succeeds. Both receive the same meta.

        Usage:
            IsString() >> NotEmpty()
            Required().compose(Positive())
        """

        def composed(value: P, *meta: Any) -> Validated[E | F, B]:
            return self.fn(value, *meta).flat_map(lambda a: other(a, *meta))

        return ValidationRule(composed)

    def compose_with(self, other: ValidationRule[A, F, B]) -> ValidationRule[P, E | F, B]:
        return self.compose(other)

    def __rshift__(self, other: ValidationRule[A, F, B]) -> ValidationRule[P, E | F, B]:
        return self.compose(other)

    def map(self, f: Callable[[A], B]) -> ValidationRule[P, E, B]:
        return ValidationRule(lambda value, *meta: self.fn(value, *meta).map(f))

    def map_error(self, f: Callable[[E], F]) -> ValidationRule[P, F, A]:
        return ValidationRule(lambda value, *meta: self.fn(value, *meta).map_error(f))

    def filter(
        self, pred: Callable[[A], bool], to_error: Callable[[A], F]
    ) -> ValidationRule[P, E | F, A]:
        return ValidationRule(
            lambda value, *meta: self.fn(value, *meta).filter(pred, to_error)
        )

    def test(self, *checks: Callable[..., Validated[F, Any]]) -> ValidationRule[P, E | list[F], A]:
        """
        Attach independent checks to the validated value.

        Each check is a rule or a (value, *meta) -> Validated function and
        receives the same meta as this rule. Every check runs; all failures
        are reported together as a list in declared order.
        """

        def tested(value: P, *meta: Any) -> Validated[E | list[F], A]:
            bound = [_bind_meta(check, meta) for check in checks]
            return self.fn(value, *meta).test(*bound)

        return ValidationRule(tested)

    def recover(self, f: Callable[[E], B]) -> ValidationRule[P, Any, A | B]:
        """Replace any failure with the fallback f(error). The result never fails."""
        return ValidationRule(lambda value, *meta: self.fn(value, *meta).recover(f))

    def or_else(self, alternative: ValidationRule[P, F, B]) -> ValidationRule[P, F, A | B]:
        """
        Try self, falling back to alternative on failure.

        The alternative's result (valid or not) is returned verbatim. The
        input must be acceptable to both rules.
        """

        def either(value: P, *meta: Any) -> Validated[F, A | B]:
            result = self.fn(value, *meta)
            if result.is_valid():
                return result
            return alternative(value, *meta)

        return ValidationRule(either)

    def __or__(self, alternative: ValidationRule[P, F, B]) -> ValidationRule[P, F, A | B]:
        return self.or_else(alternative)

    def required(self) -> ValidationRule[P | None, E | str, A]:
        """Fail with IS_MISSING on None; otherwise delegate to self."""
        return ValidationRule(_present).compose(self)

    def optional(self) -> ValidationRule[P | None, E, A | None]:
        """Succeed with None on None; otherwise delegate to self."""

        def optional(value: P | None, *meta: Any) -> Validated[E, A | None]:
            if value is None:
                return ok(None)
            return self.fn(value, *meta)

        return ValidationRule(optional)

    def many(self) -> ValidationRule[Sequence[P], list[E | None], list[A]]:
        from .aggregate import many

        return many(self)

    def of(self, element_rule: ValidationRule[Any, F, B]) -> ValidationRule[P, E | list[F | None], list[B]]:
        from .aggregate import of

        return of(self, element_rule)

    def lmap(self, f: Callable[..., Sequence[Any]]) -> ValidationRule[P, E, A]:
        """
        Adapt the meta arguments this rule expects.

        The new rule takes any meta, and calls self with f(*meta) unpacked.

        Usage:
            needs_locale = ValidationRule.create(lambda s, locale: ...)
            needs_request = needs_locale.lmap(lambda request: (request.locale,))
        """
        return ValidationRule(lambda value, *meta: self.fn(value, *f(*meta)))

    def upcast_meta(self) -> ValidationRule[P, E, A]:
        """Widen the declared meta type. Does nothing at runtime."""
        return self

    def memoize(
        self,
        equality: Equality | None = None,
        meta_equalities: Sequence[Equality | None] = (),
    ) -> ValidationRule[P, E, A]:
        """Cache the most recent result of this rule; see vetted.memoize."""
        return ValidationRule(
            memoize(self.fn, equality=equality, meta_equalities=meta_equalities)
        )


def _bind_meta(check: Callable[..., Validated[F, Any]], meta: tuple) -> Callable[[Any], Validated[F, Any]]:
    def bound(a: Any) -> Validated[F, Any]:
        return check(a, *meta)

    return bound
