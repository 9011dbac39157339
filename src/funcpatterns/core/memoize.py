"""
Memoization for pure functions.

`memoize` wraps a function with a cache keyed by its input. The first call for a
key computes and stores the value; later calls for the same key return the
stored value without invoking the function again. The cache only grows.

The wrapped function must be pure. Memoizing a function with side effects or
input-independent output silently returns stale results.

Caches are not thread-safe by default. Pass `thread_safe=True` to guard the
cache with a lock; the wrapped function is then invoked exactly once per key
even when several threads ask for the same unseen key at the same time.
"""

from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Callable, Hashable
from contextlib import nullcontext
from typing import Any, overload

logger = logging.getLogger(__name__)

type KeyFunc = Callable[..., Hashable]


def default_key(*args: Any, **kwargs: Any) -> Hashable:
    """Builds a cache key from positional args plus sorted keyword args."""
    if not kwargs:
        return args
    return (args, tuple(sorted(kwargs.items())))


class Memoized[R]:
    """A callable wrapping `func` with an input-keyed cache."""

    def __init__(
        self,
        func: Callable[..., R],
        key: KeyFunc | None = None,
        thread_safe: bool = False,
    ) -> None:
        self.func = func
        self.key = key or default_key
        self.thread_safe = thread_safe
        self.hits = 0
        self.misses = 0
        self._cache: dict[Hashable, R] = {}
        self._lock = threading.RLock() if thread_safe else nullcontext()
        functools.update_wrapper(self, func)

    def __call__(self, *args: Any, **kwargs: Any) -> R:
        cache_key = self.key(*args, **kwargs)
        try:
            hash(cache_key)
        except TypeError as e:
            raise TypeError(
                f"Cannot memoize {self.func.__name__}: key {cache_key!r} is not hashable; "
                "pass key= to extract a hashable key"
            ) from e

        with self._lock:
            if cache_key in self._cache:
                self.hits += 1
                return self._cache[cache_key]

            self.misses += 1
            logger.debug("Cache miss for %s with key %r", self.func.__name__, cache_key)
            value = self.func(*args, **kwargs)
            self._cache[cache_key] = value
            return value

    def __get__(self, instance: object, owner: type | None = None) -> Callable[..., R]:
        """Binds `instance` as the first argument when used on a method."""
        if instance is None:
            return self
        return functools.partial(self, instance)

    def __contains__(self, cache_key: object) -> bool:
        return cache_key in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    def clear(self) -> None:
        """Drops every cached value and resets the hit/miss counters."""
        with self._lock:
            self._cache.clear()
            self.hits = 0
            self.misses = 0


@overload
def memoize[R](func: Callable[..., R], /) -> Memoized[R]: ...


@overload
def memoize[R](
    *, key: KeyFunc | None = None, thread_safe: bool = False
) -> Callable[[Callable[..., R]], Memoized[R]]: ...


def memoize[R](
    func: Callable[..., R] | None = None,
    /,
    *,
    key: KeyFunc | None = None,
    thread_safe: bool = False,
) -> Memoized[R] | Callable[[Callable[..., R]], Memoized[R]]:
    """
    Wraps a pure function with a cache keyed by its input.

    Usable directly (`memoize(f)`), as a bare decorator (`@memoize`), or as a
    decorator factory (`@memoize(key=..., thread_safe=True)`).

    Args:
        func: The pure function to wrap.
        key: Extracts a hashable cache key from the call arguments. Required
            when the arguments themselves are not hashable.
        thread_safe: Guard cache access with a lock.

    Returns:
        The memoized callable, or a decorator producing one.
    """
    if func is not None:
        return Memoized(func, key=key, thread_safe=thread_safe)

    def decorator(f: Callable[..., R]) -> Memoized[R]:
        return Memoized(f, key=key, thread_safe=thread_safe)

    return decorator


__all__ = ["KeyFunc", "Memoized", "default_key", "memoize"]
