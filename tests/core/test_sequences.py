import pytest

from funcpatterns.core.sequences import (
    fibonacci_sequence,
    infinite_sequence,
    is_prime,
    primes,
    take,
)


def test_infinite_sequence_yields_increasing_numbers() -> None:
    assert take(5, infinite_sequence()) == [0, 1, 2, 3, 4]


def test_infinite_sequence_honours_start() -> None:
    assert take(3, infinite_sequence(10)) == [10, 11, 12]


def test_fibonacci_sequence_yields_expected_values() -> None:
    assert take(8, fibonacci_sequence()) == [0, 1, 1, 2, 3, 5, 8, 13]


def test_sequences_restart_when_called_again() -> None:
    first = take(4, fibonacci_sequence())
    second = take(4, fibonacci_sequence())
    assert first == second == [0, 1, 1, 2]


def test_take_consumes_lazily_from_shared_iterator() -> None:
    numbers = infinite_sequence()
    assert take(2, numbers) == [0, 1]
    assert take(2, numbers) == [2, 3]


def test_primes() -> None:
    assert take(10, primes()) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


@pytest.mark.parametrize(
    ("value", "expected"),
    [(-3, False), (0, False), (1, False), (2, True), (9, False), (97, True)],
)
def test_is_prime(value: int, expected: bool) -> None:
    assert is_prime(value) is expected


def test_take_rejects_negative_counts() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        take(-1, infinite_sequence())


def test_take_zero_is_empty() -> None:
    assert take(0, primes()) == []
