"""Declarative range and emptiness checks for configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


class ValidationError(ValueError):
    """Raised when a value fails a validation rule."""


@dataclass(frozen=True)
class _Rule:
    check: Callable[[Any], bool]
    message: str


def _describe(limit: Any) -> str:
    if isinstance(limit, int):
        return str(int(limit))
    return str(limit)


def gt(limit: Any) -> _Rule:
    """Rule requiring a value strictly greater than ``limit``."""
    return _Rule(lambda value: value > limit, f"must be greater than {_describe(limit)}")


def gte(limit: Any) -> _Rule:
    """Rule requiring a value greater than or equal to ``limit``."""
    return _Rule(
        lambda value: value >= limit,
        f"must be greater than or equal to {_describe(limit)}",
    )


def lt(limit: Any) -> _Rule:
    """Rule requiring a value strictly less than ``limit``."""
    return _Rule(lambda value: value < limit, f"must be less than {_describe(limit)}")


def lte(limit: Any) -> _Rule:
    """Rule requiring a value less than or equal to ``limit``."""
    return _Rule(
        lambda value: value <= limit,
        f"must be less than or equal to {_describe(limit)}",
    )


def not_empty() -> _Rule:
    """Rule requiring a non-empty sized value."""
    return _Rule(lambda value: len(value) > 0, "cannot be empty")


def validate(name: str, value: Any, *args: _Rule) -> Any:
    """Check ``value`` against each rule in order and return it unchanged.

    Raises ValidationError naming the field on the first failing rule.
    """
    for rule in args:
        if not rule.check(value):
            raise ValidationError(f"'{name}' {rule.message}")
    return value