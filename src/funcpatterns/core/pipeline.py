"""
Pipeline glue: pure higher-order combinators with no internal state.
"""

from collections.abc import Callable
from functools import reduce
from typing import Any

from returns.curry import partial as _partial
from returns.functions import compose as _compose

from .option import Option
from .result import Result


def compose[A, B, C](first: Callable[[A], B], second: Callable[[B], C]) -> Callable[[A], C]:
    """Returns a function equivalent to `x -> second(first(x))`."""
    return _compose(first, second)


def compose_all(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Composes any number of single-argument functions, left to right."""
    if not functions:
        return lambda value: value
    return reduce(compose, functions)


def partial[R](func: Callable[..., R], *args: Any, **kwargs: Any) -> Callable[..., R]:
    """Fixes leading positional and keyword arguments of `func`."""
    return _partial(func, *args, **kwargs)


def bind_all(initial: Option[Any] | Result[Any, Any], *steps: Callable[[Any], Any]) -> Any:
    """Threads an Option or Result through `bind` steps, short-circuiting on failure."""
    return reduce(lambda container, step: container.bind(step), steps, initial)


def map_all(initial: Option[Any] | Result[Any, Any], *functions: Callable[[Any], Any]) -> Any:
    """Threads an Option or Result through `map` steps."""
    return reduce(lambda container, f: container.map(f), functions, initial)


__all__ = ["bind_all", "compose", "compose_all", "map_all", "partial"]
