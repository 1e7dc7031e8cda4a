"""
Vetted - Composable validation rules that report every failure.

Usage:
    from vetted import IsNumber, IsObject, IsString, Optional, many

    person = IsObject().shape({
        "name": IsString().not_empty(),
        "age": IsNumber().positive(),
        "nickname": Optional(IsString()),
    })

    person({"name": "", "age": -1})
    # Invalid({"name": "EMPTY_STRING", "age": "NOT_POSITIVE"})

    many(IsNumber())([1, "2", 3])
    # Invalid([None, "NOT_A_NUMBER", None])
"""

from .aggregate import combine, many, of, sequence
from .context import is_strict, validation_context
from .core import IS_MISSING, IS_UNDEFINED, ValidationRule
from .errors import ArityMismatchError, RecordMismatchError, VettedError
from .memoize import Memoized, identical_or_equal, memoize
from .schema import from_pydantic, to_rule, validate
from .types import Invalid, Valid, Validated, error, ok
from .validators import (
    DOES_NOT_CONTAIN_FLOAT,
    EMPTY_STRING,
    NOT_A_BOOLEAN,
    NOT_A_NUMBER,
    NOT_A_STRING,
    NOT_AN_ARRAY,
    NOT_AN_OBJECT,
    NOT_POSITIVE,
    WRONG_TYPE,
    ContainsFloat,
    IsArray,
    IsBoolean,
    IsNumber,
    IsObject,
    IsString,
    IsType,
    NotEmpty,
    NumberRule,
    ObjectRule,
    Optional,
    Positive,
    Required,
    StringRule,
)

__all__ = [
    # Result types
    "Validated",
    "Valid",
    "Invalid",
    "ok",
    "error",
    # Rules
    "ValidationRule",
    "many",
    "of",
    "combine",
    "sequence",
    # Validators
    "IsString",
    "IsNumber",
    "IsBoolean",
    "IsObject",
    "IsArray",
    "IsType",
    "Positive",
    "NotEmpty",
    "ContainsFloat",
    "Required",
    "Optional",
    "StringRule",
    "NumberRule",
    "ObjectRule",
    # Error values
    "IS_MISSING",
    "IS_UNDEFINED",
    "NOT_A_STRING",
    "NOT_A_NUMBER",
    "NOT_A_BOOLEAN",
    "NOT_AN_OBJECT",
    "NOT_AN_ARRAY",
    "WRONG_TYPE",
    "NOT_POSITIVE",
    "EMPTY_STRING",
    "DOES_NOT_CONTAIN_FLOAT",
    # Memoization
    "memoize",
    "Memoized",
    "identical_or_equal",
    # Configuration
    "validation_context",
    "is_strict",
    # Schema
    "to_rule",
    "validate",
    "from_pydantic",
    # Exceptions
    "VettedError",
    "RecordMismatchError",
    "ArityMismatchError",
]
