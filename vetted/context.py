"""
Context manager for validation configuration (e.g., strict mode).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for strict mode
_strict_mode: ContextVar[bool] = ContextVar("strict_mode", default=False)


def is_strict() -> bool:
    """Check if strict mode is currently enabled."""
    return _strict_mode.get()


@contextmanager
def validation_context(*, strict: bool = False):
    """
    Context manager for validation configuration.

    Args:
        strict: If True, record combinators raise RecordMismatchError when the
               input's keys differ from the rule record's keys, instead of
               reading missing keys as None and ignoring extra ones.

    Example:
        from vetted import IsNumber, IsString, combine, validation_context

        person = combine({"name": IsString(), "age": IsNumber()})

        # Normal: the missing "age" is validated as None
        person({"name": "Ada"})

        # Strict: a record shaped differently from the rules is a bug
        with validation_context(strict=True):
            person({"name": "Ada"})  # RecordMismatchError!
    """
    token = _strict_mode.set(strict)
    try:
        yield
    finally:
        _strict_mode.reset(token)
