"""
Function composition: build a text pipeline out of small pure functions.
"""

from rich.console import Console

from ..app import config
from ..core.pipeline import compose
from ._console import resolve_console


def remove_spaces(text: str) -> str:
    return text.replace(" ", "")


def to_upper_case(text: str) -> str:
    return text.upper()


def reverse(text: str) -> str:
    return text[::-1]


transform = compose(compose(remove_spaces, to_upper_case), reverse)


def run(console: Console | None = None) -> None:
    console = resolve_console(console)
    original = config.COMPOSITION_SAMPLE
    console.print(f"Original: {original}")
    console.print(f"Transformed: {transform(original)}")


__all__ = ["remove_spaces", "reverse", "run", "to_upper_case", "transform"]
