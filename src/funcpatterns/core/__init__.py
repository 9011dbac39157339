"""
The functional building blocks: Option, Result, memoization, validation,
composition helpers and lazy sequences.
"""

from .errors import FuncPatternsError, UnwrapError
from .memoize import Memoized, memoize
from .option import NOTHING, Nothing, Option, Some, from_maybe, from_optional, none, some
from .pipeline import bind_all, compose, compose_all, map_all, partial
from .result import Err, Ok, Result, failure, from_returns, success
from .sequences import fibonacci_sequence, infinite_sequence, is_prime, primes, take
from .validation import ValidationRule, combine, matches, max_length, min_length, not_empty, validate

__all__ = [
    "NOTHING",
    "Err",
    "FuncPatternsError",
    "Memoized",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "Some",
    "UnwrapError",
    "ValidationRule",
    "bind_all",
    "combine",
    "compose",
    "compose_all",
    "failure",
    "fibonacci_sequence",
    "from_maybe",
    "from_optional",
    "from_returns",
    "infinite_sequence",
    "is_prime",
    "map_all",
    "matches",
    "max_length",
    "memoize",
    "min_length",
    "none",
    "not_empty",
    "partial",
    "primes",
    "some",
    "success",
    "take",
    "validate",
]
