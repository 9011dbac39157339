"""
Validator combinators.

A validation rule is a pure function from a value to `Result[value, message]`.
`combine` merges rules into one composite rule that runs *every* rule and
reports *every* failure, which is what user-facing validation wants.

This is deliberately different from `Result.bind`: railway composition stops at
the first failure for control flow, while validation aggregates all errors.
"""

import re
from collections.abc import Callable, Sized

from ..app import config
from .result import Err, Ok, Result

type ValidationRule[T] = Callable[[T], Result[T, str]]


def combine[T](*rules: ValidationRule[T]) -> ValidationRule[T]:
    """
    Combines rules into a single rule that evaluates all of them.

    Args:
        *rules: The rules to evaluate, in reporting order.

    Returns:
        A rule returning `Ok(value)` when every rule passes, otherwise `Err` with
        the failure messages joined by the configured separator.
    """

    def composite(value: T) -> Result[T, str]:
        results = [rule(value) for rule in rules]
        errors = [result.error for result in results if isinstance(result, Err)]
        if errors:
            return Err(config.VALIDATION_ERROR_SEPARATOR.join(errors))
        return Ok(value)

    return composite


def validate[T](value: T, *rules: ValidationRule[T]) -> Result[T, str]:
    """Validates `value` against every rule at once."""
    return combine(*rules)(value)


def not_empty(value: str | None) -> Result[str | None, str]:
    """Fails on `None`, empty and whitespace-only strings."""
    if value is None or not value.strip():
        return Err("Value cannot be empty")
    return Ok(value)


def min_length[T: Sized](minimum: int) -> ValidationRule[T]:
    def rule(value: T) -> Result[T, str]:
        if value is not None and len(value) < minimum:
            return Err(f"Minimum length is {minimum}")
        return Ok(value)

    return rule


def max_length[T: Sized](maximum: int) -> ValidationRule[T]:
    def rule(value: T) -> Result[T, str]:
        if value is not None and len(value) > maximum:
            return Err(f"Maximum length is {maximum}")
        return Ok(value)

    return rule


def matches(pattern: str, message: str | None = None) -> ValidationRule[str]:
    """Builds a rule requiring the whole value to match `pattern`."""
    compiled = re.compile(pattern)
    error = message or f"Value must match {pattern}"

    def rule(value: str) -> Result[str, str]:
        if value is None or compiled.fullmatch(value) is None:
            return Err(error)
        return Ok(value)

    return rule


__all__ = [
    "ValidationRule",
    "combine",
    "matches",
    "max_length",
    "min_length",
    "not_empty",
    "validate",
]
