from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field
from rich.console import Console


class ImmutableModel(BaseModel):
    """Base class for immutable Pydantic models."""

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        validate_default=True,
    )


class ExampleInfo(ImmutableModel):
    """Describes a runnable example and how to invoke it."""

    name: str = Field(..., min_length=1, pattern=r"^[a-z][a-z0-9-]*$")
    title: str = Field(..., min_length=1)
    summary: str = ""
    runner: Callable[[Console | None], None]

    def run(self, console: Console | None = None) -> None:
        self.runner(console)


__all__ = ["ExampleInfo", "ImmutableModel"]
