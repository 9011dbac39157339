"""
Functional validation: aggregate every rule failure into one report.
"""

from rich.console import Console
from rich.markup import escape

from ..app import config
from ..core.validation import ValidationRule, combine, min_length, not_empty
from ._console import resolve_console

username_validator: ValidationRule[str] = combine(not_empty, min_length(config.VALIDATION_MIN_LENGTH))


def describe(sample: str) -> str:
    return username_validator(sample).match(
        on_success=lambda _: f"'{sample}' is valid",
        on_failure=lambda error: f"'{sample}' is invalid: {error}",
    )


def run(console: Console | None = None) -> None:
    console = resolve_console(console)
    for sample in config.VALIDATION_SAMPLES:
        console.print(escape(describe(sample)))


__all__ = ["describe", "run", "username_validator"]
