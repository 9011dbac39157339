"""
Memoization: a recursive Fibonacci that reuses every previously computed term.
"""

from rich.console import Console

from ..app import config
from ..core.memoize import memoize
from ._console import resolve_console


@memoize
def fibonacci(n: int) -> int:
    if n < 2:
        return n
    # Recursive calls go through the memoized wrapper.
    return fibonacci(n - 1) + fibonacci(n - 2)


def run(console: Console | None = None) -> None:
    console = resolve_console(console)
    for i in range(config.MEMOIZED_FIBONACCI_LIMIT + 1):
        console.print(f"F({i}) = {fibonacci(i)}")


__all__ = ["fibonacci", "run"]
