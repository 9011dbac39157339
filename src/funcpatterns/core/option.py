"""
Defines the `Option` sum type for modelling the presence or absence of a value.

An `Option` is either `Some(value)` or `Nothing`. Absence is represented by state
rather than by `None` checks or exceptions, so every consumer has to say what
happens in both cases (usually through `match`).

Instances are immutable; `map` and `bind` always hand back a new instance.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final, NoReturn

from returns.maybe import Maybe
from returns.maybe import Nothing as _ReturnsNothing
from returns.maybe import Some as _ReturnsSome

from .errors import UnwrapError


@dataclass(frozen=True, slots=True)
class Some[T]:
    """An `Option` holding a value."""

    value: T

    def is_some(self) -> bool:
        return True

    def is_nothing(self) -> bool:
        return False

    def match[R](self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:
        """Applies `on_some` to the wrapped value; `on_none` is never called."""
        return on_some(self.value)

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        return Some(f(self.value))

    def bind[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        return f(self.value)

    def value_or(self, default: T) -> T:
        return self.value

    def unwrap(self) -> T:
        return self.value

    def to_maybe(self) -> Maybe[T]:
        return _ReturnsSome(self.value)


@dataclass(frozen=True, slots=True)
class Nothing:
    """An empty `Option`."""

    def is_some(self) -> bool:
        return False

    def is_nothing(self) -> bool:
        return True

    def match[R](self, on_some: Callable[[object], R], on_none: Callable[[], R]) -> R:
        """Calls `on_none`; `on_some` is never called."""
        return on_none()

    def map(self, f: Callable[[object], object]) -> Nothing:
        return self

    def bind(self, f: Callable[[object], Option[object]]) -> Nothing:
        return self

    def value_or[T](self, default: T) -> T:
        return default

    def unwrap(self) -> NoReturn:
        raise UnwrapError("Called unwrap() on Nothing")

    def to_maybe(self) -> Maybe[object]:
        return _ReturnsNothing

    def __repr__(self) -> str:
        return "Nothing"


NOTHING: Final[Nothing] = Nothing()

type Option[T] = Some[T] | Nothing


def some[T](value: T) -> Option[T]:
    """Wraps `value` in `Some`."""
    return Some(value)


def none() -> Option[object]:
    """Returns the empty option."""
    return NOTHING


def from_optional[T](value: T | None) -> Option[T]:
    """Lifts a nullable value: `None` becomes `Nothing`, anything else `Some`."""
    return NOTHING if value is None else Some(value)


def from_maybe[T](maybe: Maybe[T]) -> Option[T]:
    """Converts a `returns` `Maybe` container into an `Option`."""
    if maybe is _ReturnsNothing:
        return NOTHING
    return Some(maybe.unwrap())


__all__ = [
    "NOTHING",
    "Nothing",
    "Option",
    "Some",
    "from_maybe",
    "from_optional",
    "none",
    "some",
]
