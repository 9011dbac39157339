"""
Runnable demonstrations of each functional pattern.

Every example exposes `run(console=None)`, printing a few illustrative lines.
The registry below is the single place the CLI looks them up.
"""

from types import MappingProxyType

from ..core.result import Err, Ok, Result
from ..models import ExampleInfo
from . import (
    composition,
    lazy_sequences,
    memoization,
    option_maybe,
    partial_application,
    railway,
    validation,
)

EXAMPLES: MappingProxyType[str, ExampleInfo] = MappingProxyType(
    {
        info.name: info
        for info in (
            ExampleInfo(
                name="composition",
                title="Function Composition",
                summary="Chain small string transforms into one pipeline.",
                runner=composition.run,
            ),
            ExampleInfo(
                name="partial-application",
                title="Partial Application",
                summary="Fix a tax rate to build reusable calculators.",
                runner=partial_application.run,
            ),
            ExampleInfo(
                name="option",
                title="Option / Maybe",
                summary="Parse integers without nulls or exceptions.",
                runner=option_maybe.run,
            ),
            ExampleInfo(
                name="railway",
                title="Railway-Oriented Programming",
                summary="Short-circuit a chain of fallible divisions.",
                runner=railway.run,
            ),
            ExampleInfo(
                name="validation",
                title="Functional Validation",
                summary="Combine rules and report every failure at once.",
                runner=validation.run,
            ),
            ExampleInfo(
                name="memoization",
                title="Memoization",
                summary="Cache a recursive Fibonacci by input.",
                runner=memoization.run,
            ),
            ExampleInfo(
                name="lazy-sequences",
                title="Lazy Sequences",
                summary="Pull bounded prefixes from infinite generators.",
                runner=lazy_sequences.run,
            ),
        )
    }
)


def get_example(name: str) -> Result[ExampleInfo, str]:
    """Looks up an example by name."""
    info = EXAMPLES.get(name.strip().lower())
    if info is None:
        available = ", ".join(EXAMPLES)
        return Err(f"Unknown example '{name}'. Available: {available}")
    return Ok(info)


__all__ = [
    "EXAMPLES",
    "composition",
    "get_example",
    "lazy_sequences",
    "memoization",
    "option_maybe",
    "partial_application",
    "railway",
    "validation",
]
