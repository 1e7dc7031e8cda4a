"""
Schema operations for vetted.

Provides to_rule(), validate() and from_pydantic() for declaring rules with
plain Python values and for reusing Pydantic models as rules.
"""

from __future__ import annotations

from functools import reduce
from typing import Any

from pydantic import BaseModel, ValidationError

from .core import ValidationRule
from .types import Validated, error, ok
from .validators import IsArray, IsBoolean, IsObject, IsString, IsType

ROOT_KEY = "__root__"

_TYPE_RULES = {
    bool: IsBoolean,
    str: IsString,
    dict: IsObject,
    list: IsArray,
}


def to_rule(schema: Any) -> ValidationRule:
    """
    Coerce a declarative schema to a rule.

    Conversion rules:
        ValidationRule -> pass through
        BaseModel subclass -> from_pydantic(model)
        bool / str / dict / list -> IsBoolean / IsString / IsObject / IsArray
        other type -> IsType(type)
        dict -> IsObject().shape(...) with recursive conversion
        list -> IsArray().of(...) with item rule from the list; several
                items are tried in order with or_else
        Callable -> ValidationRule.create(callable), which must return Validated
    """
    if isinstance(schema, ValidationRule):
        return schema

    if isinstance(schema, type):
        if issubclass(schema, BaseModel):
            return from_pydantic(schema)
        if schema in _TYPE_RULES:
            return _TYPE_RULES[schema]()
        return IsType(schema)

    if isinstance(schema, dict):
        return IsObject().shape({k: to_rule(v) for k, v in schema.items()})

    if isinstance(schema, list):
        if len(schema) == 0:
            raise ValueError("Empty list cannot be converted to a rule")
        item_rule = reduce(
            lambda left, right: left.or_else(right), (to_rule(s) for s in schema)
        )
        return IsArray().of(item_rule)

    if callable(schema):
        return ValidationRule.create(schema)

    raise TypeError(f"Cannot convert {type(schema).__name__} to rule")


def validate(data: Any, schema: Any, *meta: Any) -> Validated[Any, Any]:
    """
    Validate data against a schema.

    Args:
        data: The value to validate
        schema: A rule, or anything to_rule() accepts
        *meta: Meta arguments passed to every rule

    Returns:
        Valid(value) if validation passes
        Invalid(errors) shaped like the schema if it fails

    Usage:
        schema = {
            "name": IsString().required(),
            "email": Optional(IsString()),
            "tags": [str],
        }
        result = validate({"name": "Alice", "tags": ["a"]}, schema)
    """
    return to_rule(schema)(data, *meta)


def from_pydantic(model: type[BaseModel]) -> ValidationRule[Any, dict, BaseModel]:
    """
    Use a Pydantic model as a rule.

    Valid holds the model instance. Invalid holds a dict keyed by the first
    element of each error location (ROOT_KEY for model-level errors),
    mapping to the list of Pydantic error types for that field.

    Usage:
        class User(BaseModel):
            name: str
            age: int

        from_pydantic(User)({"name": "Alice", "age": "x"})
        # Invalid({"age": ["int_parsing"]})
    """

    def check(value: Any, *meta: Any) -> Validated[dict, BaseModel]:
        try:
            instance = model.model_validate(value)
        except ValidationError as e:
            return error(_errors_by_field(e))
        return ok(instance)

    return ValidationRule(check)


def _errors_by_field(exc: ValidationError) -> dict[Any, list[str]]:
    """Group Pydantic errors by top-level field."""
    errors: dict[Any, list[str]] = {}
    for err in exc.errors():
        loc = err["loc"]
        key = loc[0] if loc else ROOT_KEY
        errors.setdefault(key, []).append(err["type"])
    return errors
