"""
Built-in leaf validators for vetted.

Provides factory functions that return ValidationRule instances, and the
error values they fail with.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from .aggregate import combine
from .core import IS_MISSING, ValidationRule
from .types import Validated, error, ok

NOT_A_STRING = "NOT_A_STRING"
NOT_A_NUMBER = "NOT_A_NUMBER"
NOT_A_BOOLEAN = "NOT_A_BOOLEAN"
NOT_AN_OBJECT = "NOT_AN_OBJECT"
NOT_AN_ARRAY = "NOT_AN_ARRAY"
WRONG_TYPE = "WRONG_TYPE"
NOT_POSITIVE = "NOT_POSITIVE"
EMPTY_STRING = "EMPTY_STRING"
DOES_NOT_CONTAIN_FLOAT = "DOES_NOT_CONTAIN_FLOAT"

# Leading float, as found at the start of e.g. "3.5kg"
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


class StringRule(ValidationRule[Any, Any, str]):
    """A rule producing a string, with string-specific follow-ups."""

    __slots__ = ()

    def not_empty(self) -> StringRule:
        return StringRule(self.compose(NotEmpty()).fn)

    def contains_float(self) -> NumberRule:
        return NumberRule(self.compose(ContainsFloat()).fn)


class NumberRule(ValidationRule[Any, Any, float]):
    """A rule producing a number, with number-specific follow-ups."""

    __slots__ = ()

    def positive(self) -> NumberRule:
        return NumberRule(self.compose(Positive()).fn)


class ObjectRule(ValidationRule[Any, Any, Mapping]):
    """A rule producing a mapping, which can be given a field-wise shape."""

    __slots__ = ()

    def shape(self, rules: Mapping[Any, ValidationRule]) -> ValidationRule:
        """
        Validate each field of the mapping with its own rule.

        Usage:
            IsObject().shape({"name": IsString(), "age": IsNumber().positive()})
        """
        return self.compose(combine(rules))


def IsString() -> StringRule:
    """
    Validate that value is a str.

    Usage:
        IsString()
        IsString().not_empty()
    """

    def check(value: Any, *meta: Any) -> Validated[str, str]:
        return ok(value) if isinstance(value, str) else error(NOT_A_STRING)

    return StringRule(check)


def IsNumber() -> NumberRule:
    """Validate that value is an int or float. Booleans are not numbers."""

    def check(value: Any, *meta: Any) -> Validated[str, float]:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return ok(value)
        return error(NOT_A_NUMBER)

    return NumberRule(check)


def IsBoolean() -> ValidationRule[Any, str, bool]:
    def check(value: Any, *meta: Any) -> Validated[str, bool]:
        return ok(value) if isinstance(value, bool) else error(NOT_A_BOOLEAN)

    return ValidationRule(check)


def IsObject() -> ObjectRule:
    """Validate that value is a mapping."""

    def check(value: Any, *meta: Any) -> Validated[str, Mapping]:
        return ok(value) if isinstance(value, Mapping) else error(NOT_AN_OBJECT)

    return ObjectRule(check)


def IsArray() -> ValidationRule[Any, str, list]:
    """
    Validate that value is a list or tuple; the result is always a list.

    Usage:
        IsArray().of(IsString())
    """

    def check(value: Any, *meta: Any) -> Validated[str, list]:
        if isinstance(value, (list, tuple)):
            return ok(list(value))
        return error(NOT_AN_ARRAY)

    return ValidationRule(check)


def IsType(t: type) -> ValidationRule[Any, str, Any]:
    """
    Validate that value is an instance of type.

    Usage:
        IsType(int)
        IsType(datetime) >> ...
    """

    def check(value: Any, *meta: Any) -> Validated[str, Any]:
        return ok(value) if isinstance(value, t) else error(WRONG_TYPE)

    return ValidationRule(check)


def Positive() -> NumberRule:
    """Validate that a number is not negative. Zero passes."""

    def check(n: float, *meta: Any) -> Validated[str, float]:
        return ok(n) if n >= 0 else error(NOT_POSITIVE)

    return NumberRule(check)


def NotEmpty() -> StringRule:
    def check(s: str, *meta: Any) -> Validated[str, str]:
        return error(EMPTY_STRING) if len(s) == 0 else ok(s)

    return StringRule(check)


def ContainsFloat() -> NumberRule:
    """
    Read the float at the start of a string.

    Usage:
        ContainsFloat()("3.5kg")  # Valid(3.5)
        ContainsFloat()("kg")     # Invalid(DOES_NOT_CONTAIN_FLOAT)
    """

    def check(s: str, *meta: Any) -> Validated[str, float]:
        found = _FLOAT_PREFIX.match(s)
        if found is None:
            return error(DOES_NOT_CONTAIN_FLOAT)
        return ok(float(found.group(1)))

    return NumberRule(check)


def Required() -> ValidationRule[Any, str, Any]:
    """
    Mark a value as required (cannot be None).

    Usage:
        Required()                        # Just required, no other check
        Required().compose_with(IsString())
        IsString().required()             # Same as above
    """
    return ValidationRule.identity().required()


def Optional(rule: ValidationRule) -> ValidationRule:
    """
    Allow None, validate if present.

    Usage:
        Optional(IsString())     # None or valid string
    """
    return rule.optional()
