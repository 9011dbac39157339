"""
Lazy sequences: only the elements requested by `take` are ever computed.
"""

from rich.console import Console

from ..app import config
from ..core.sequences import fibonacci_sequence, primes, take
from ._console import resolve_console


def run(console: Console | None = None) -> None:
    console = resolve_console(console)
    count = config.SEQUENCE_SAMPLE_SIZE

    first_primes = take(count, primes())
    console.print("First ten primes: " + ", ".join(map(str, first_primes)))

    first_fibonacci = take(count, fibonacci_sequence())
    console.print("First ten fibonacci numbers: " + ", ".join(map(str, first_fibonacci)))


__all__ = ["run"]
