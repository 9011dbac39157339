"""
Lazy, infinite integer sequences.

Every generator here never terminates on its own. Callers must bound how many
elements they pull, e.g. with `take`. Calling a generator function again
restarts the sequence from the beginning.
"""

import itertools
import math
from collections.abc import Iterable, Iterator


def infinite_sequence(start: int = 0) -> Iterator[int]:
    """Yields `start`, `start + 1`, `start + 2`, ..."""
    yield from itertools.count(start)


def fibonacci_sequence() -> Iterator[int]:
    current, following = 0, 1
    while True:
        yield current
        current, following = following, current + following


def is_prime(value: int) -> bool:
    if value < 2:
        return False
    return all(value % divisor for divisor in range(2, math.isqrt(value) + 1))


def primes() -> Iterator[int]:
    """Yields the primes by filtering the naturals from 2 upwards."""
    return filter(is_prime, infinite_sequence(2))


def take[T](count: int, iterable: Iterable[T]) -> list[T]:
    """Pulls at most `count` elements from `iterable`."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return list(itertools.islice(iterable, count))


__all__ = ["fibonacci_sequence", "infinite_sequence", "is_prime", "primes", "take"]
