"""
Railway-oriented programming: chain fallible steps on a two-track `Result`.
"""

from rich.console import Console

from ..app import config
from ..core.result import Err, Ok, Result
from ._console import resolve_console


def divide(left: int, right: int) -> Result[int, str]:
    if right == 0:
        return Err("Division by zero")
    # Truncates toward zero, unlike floor division.
    quotient = abs(left) // abs(right)
    return Ok(quotient if (left < 0) == (right < 0) else -quotient)


def run(console: Console | None = None) -> None:
    console = resolve_console(console)

    # Both divisions stay on the success track.
    good = (
        Ok(config.RAILWAY_START)
        .bind(lambda x: divide(x, 2))
        .bind(lambda x: divide(x, 5))
        .match(
            on_success=lambda value: f"Success result: {value}",
            on_failure=lambda error: f"Failure reason: {error}",
        )
    )
    console.print(good)

    bad = (
        Ok(config.RAILWAY_FAILING_START)
        .bind(lambda x: divide(x, 0))
        .match(
            on_success=lambda value: f"Unexpected success: {value}",
            on_failure=lambda error: f"Failure reason: {error}",
        )
    )
    console.print(bad)


__all__ = ["divide", "run"]
