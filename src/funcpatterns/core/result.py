"""
Defines the two-track `Result` type used for railway-oriented programming.

A `Result` is either `Ok` (the success track) or `Err` (the failure track).
`bind` only moves forward on the success track: once a step fails, every later
`bind` is skipped and the original error is carried to the end unchanged.

The containers interoperate with the `returns` library through `to_returns` and
`from_returns`, so functions decorated with `returns.result.safe` can feed a
railway pipeline directly.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import NoReturn

from returns import result as returns_result

from .errors import UnwrapError


@dataclass(frozen=True, slots=True)
class Ok[S]:
    """Represents a successful outcome containing a value."""

    value: S

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def bind[U, E](self, next_step: Callable[[S], Result[U, E]]) -> Result[U, E]:
        """Continues on the success track with whatever `next_step` returns."""
        return next_step(self.value)

    def map[U](self, f: Callable[[S], U]) -> Ok[U]:
        return Ok(f(self.value))

    def map_error(self, f: Callable[[object], object]) -> Ok[S]:
        return self

    def match[R](self, on_success: Callable[[S], R], on_failure: Callable[[object], R]) -> R:
        return on_success(self.value)

    def value_or(self, default: S) -> S:
        return self.value

    def unwrap(self) -> S:
        return self.value

    def to_returns(self) -> returns_result.Result[S, object]:
        return returns_result.Success(self.value)


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Represents a failure outcome containing an error."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def bind(self, next_step: Callable[[object], Result[object, E]]) -> Err[E]:
        """Short-circuits: `next_step` is never invoked on the failure track."""
        return Err(self.error)

    def map(self, f: Callable[[object], object]) -> Err[E]:
        return Err(self.error)

    def map_error[F](self, f: Callable[[E], F]) -> Err[F]:
        return Err(f(self.error))

    def match[R](self, on_success: Callable[[object], R], on_failure: Callable[[E], R]) -> R:
        return on_failure(self.error)

    def value_or[S](self, default: S) -> S:
        return default

    def unwrap(self) -> NoReturn:
        raise UnwrapError(f"Called unwrap() on Err: {self.error!r}")

    def to_returns(self) -> returns_result.Result[object, E]:
        return returns_result.Failure(self.error)


# The Result type is a union of Ok and Err, representing either success or failure.
type Result[S, E] = Ok[S] | Err[E]


def success[S](value: S) -> Result[S, object]:
    return Ok(value)


def failure[E](error: E) -> Result[object, E]:
    return Err(error)


def from_returns[S, E](container: returns_result.Result[S, E]) -> Result[S, E]:
    """Converts a `returns` `Result` container into an `Ok` or `Err`."""
    if isinstance(container, returns_result.Success):
        return Ok(container.unwrap())
    return Err(container.failure())


__all__ = ["Err", "Ok", "Result", "failure", "from_returns", "success"]
