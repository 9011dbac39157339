"""
Option/Maybe: parse integers without exceptions or `None` checks.
"""

import re
from typing import Final

from rich.console import Console

from ..app import config
from ..core.option import NOTHING, Option, Some
from ._console import resolve_console

_INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+", re.ASCII)


def parse_int(text: str) -> Option[int]:
    """
    Parses a signed 32-bit decimal integer.

    Surrounding whitespace is allowed; anything else that is not optionally
    signed ASCII digits, or that falls outside the 32-bit range, is `Nothing`.
    """
    stripped = text.strip()
    if _INTEGER_PATTERN.fullmatch(stripped) is None:
        return NOTHING
    value = int(stripped)
    if not config.INT32_MIN <= value <= config.INT32_MAX:
        return NOTHING
    return Some(value)


def describe(text: str) -> str:
    return (
        parse_int(text)
        .map(lambda number: number * 2)
        .match(
            on_some=lambda doubled: f"Parsed {text} -> {doubled}",
            on_none=lambda: f"Failed to parse {text}",
        )
    )


def run(console: Console | None = None) -> None:
    console = resolve_console(console)
    for text in config.OPTION_SAMPLES:
        console.print(describe(text))


__all__ = ["describe", "parse_int", "run"]
