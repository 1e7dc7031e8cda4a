"""
Aggregation combinators for vetted.

Lift element and field rules to whole arrays, tuples and records. Every
element or field is validated; failures are accumulated, never
short-circuited.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence

from .context import is_strict
from .core import ValidationRule
from .errors import ArityMismatchError, RecordMismatchError
from .lib.record_helpers import field_value, has_field, keys
from .types import Validated
from .types import combine as combine_validated
from .types import sequence as sequence_validated

logger = logging.getLogger(__name__)


def many(rule: ValidationRule) -> ValidationRule:
    """
    Apply a rule to every element of an array.

    Returns Valid(list of values), or Invalid(list of errors) the same length
    as the input with None holes at the positions that validated.

    Usage:
        many(Positive())([1, -2])  # Invalid([None, NOT_POSITIVE])
    """

    def each(values: Iterable[Any], *meta: Any) -> Validated:
        return sequence_validated(rule(value, *meta) for value in values)

    return ValidationRule(each)


def of(array_rule: ValidationRule, element_rule: ValidationRule) -> ValidationRule:
    """Validate an array with array_rule, then each of its elements with element_rule."""
    return array_rule.compose(many(element_rule))


def combine(rules: Mapping[Any, ValidationRule]) -> ValidationRule:
    """
    Apply a record of rules to the same-named fields of a record.

    Each rule gets the field's value (None when absent) and the shared meta.
    Returns Valid(dict of values), or Invalid(dict) holding only the keys
    whose rule failed.

    Raises:
        RecordMismatchError: In strict mode, if the record's keys differ from
            the rule record's keys.
    """
    rule_keys = keys(rules)

    def fields(record: Any, *meta: Any) -> Validated:
        if is_strict():
            _check_record_keys(record, rules, rule_keys)

        return combine_validated(
            {key: rules[key](field_value(record, key), *meta) for key in rule_keys}
        )

    return ValidationRule(fields)


def sequence(rules: Sequence[ValidationRule]) -> ValidationRule:
    """
    Apply rules positionally: rules[i] validates value[i].

    Returns Valid(list of values) or Invalid(list of errors) with None holes,
    like many().

    Raises:
        ArityMismatchError: If the input length differs from the number of rules.
    """
    rules = tuple(rules)

    def positional(values: Iterable[Any], *meta: Any) -> Validated:
        items = list(values)
        if len(items) != len(rules):
            raise ArityMismatchError(len(rules), len(items))

        return sequence_validated(
            rule(item, *meta) for rule, item in zip(rules, items)
        )

    return ValidationRule(positional)


def _check_record_keys(record: Any, rules: Mapping[Any, ValidationRule], rule_keys: list[Any]) -> None:
    missing = [key for key in rule_keys if not has_field(record, key)]
    unexpected = [key for key in keys(record) if key not in rules]

    if missing or unexpected:
        logger.debug(
            "record mismatch: missing=%r unexpected=%r", missing, unexpected
        )
        raise RecordMismatchError(missing, unexpected)
