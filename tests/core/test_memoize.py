import logging
import threading
import time

import pytest

from funcpatterns.core.memoize import Memoized, memoize


def test_memoize_invokes_function_once_per_key() -> None:
    call_count = 0

    def square(value: int) -> int:
        nonlocal call_count
        call_count += 1
        return value * value

    memoized = memoize(square)

    assert memoized(5) == 25
    assert memoized(5) == 25
    assert call_count == 1
    assert memoized.hits == 1
    assert memoized.misses == 1


def test_distinct_keys_are_cached_separately() -> None:
    calls: list[int] = []

    @memoize
    def identity(value: int) -> int:
        calls.append(value)
        return value

    assert [identity(1), identity(2), identity(1)] == [1, 2, 1]
    assert calls == [1, 2]
    assert len(identity) == 2
    assert (1,) in identity


def test_keyword_arguments_form_part_of_the_key() -> None:
    @memoize
    def power(base: int, exponent: int = 2) -> int:
        return base**exponent

    assert power(3) == 9
    assert power(3, exponent=3) == 27
    assert power.misses == 2


def test_unhashable_arguments_require_a_key_function() -> None:
    memoized = memoize(sum)

    with pytest.raises(TypeError, match="key="):
        memoized([1, 2, 3])


def test_key_function_enables_unhashable_inputs() -> None:
    calls = 0

    @memoize(key=lambda values: tuple(values))
    def total(values: list[int]) -> int:
        nonlocal calls
        calls += 1
        return sum(values)

    assert total([1, 2, 3]) == 6
    assert total([1, 2, 3]) == 6
    assert calls == 1


def test_recursive_function_reuses_cache() -> None:
    @memoize
    def fib(n: int) -> int:
        return n if n < 2 else fib(n - 1) + fib(n - 2)

    assert fib(50) == 12586269025
    assert fib.misses == 51


def test_clear_resets_cache_and_counters() -> None:
    memoized = memoize(lambda x: x)
    memoized(1)
    memoized(1)

    memoized.clear()

    assert len(memoized) == 0
    assert (memoized.hits, memoized.misses) == (0, 0)


def test_wrapper_preserves_metadata() -> None:
    def documented(x: int) -> int:
        """Docs."""
        return x

    memoized = memoize(documented)
    assert isinstance(memoized, Memoized)
    assert memoized.__name__ == "documented"
    assert memoized.__doc__ == "Docs."


def test_thread_safe_cache_computes_each_key_once() -> None:
    call_count = 0
    barrier = threading.Barrier(8)

    @memoize(thread_safe=True)
    def slow_square(value: int) -> int:
        nonlocal call_count
        call_count += 1
        time.sleep(0.01)
        return value * value

    results: list[int] = []

    def worker() -> None:
        barrier.wait()
        results.append(slow_square(7))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results == [49] * 8
    assert call_count == 1


def test_thread_safe_cache_supports_recursion() -> None:
    @memoize(thread_safe=True)
    def fib(n: int) -> int:
        return n if n < 2 else fib(n - 1) + fib(n - 2)

    assert fib(30) == 832040


def test_cache_miss_is_logged_at_debug(caplog, monkeypatch) -> None:
    monkeypatch.setattr(logging.getLogger("funcpatterns"), "propagate", True)
    caplog.set_level(logging.DEBUG, logger="funcpatterns.core.memoize")

    @memoize
    def triple(value: int) -> int:
        return value * 3

    triple(2)
    triple(2)

    misses = [r for r in caplog.records if r.getMessage().startswith("Cache miss for triple")]
    assert len(misses) == 1
    assert misses[0].levelno == logging.DEBUG


def test_memoize_works_on_methods() -> None:
    class Calculator:
        def __init__(self) -> None:
            self.calls = 0

        @memoize
        def square(self, value: int) -> int:
            self.calls += 1
            return value * value

    calculator = Calculator()

    assert calculator.square(4) == 16
    assert calculator.square(4) == 16
    assert calculator.calls == 1
    assert isinstance(Calculator.square, Memoized)
