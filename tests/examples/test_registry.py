import io

import pytest
from pydantic import ValidationError
from rich.console import Console

from funcpatterns.core.result import Err, Ok
from funcpatterns.examples import EXAMPLES, get_example
from funcpatterns.models import ExampleInfo


def test_registry_lists_every_pattern() -> None:
    assert list(EXAMPLES) == [
        "composition",
        "partial-application",
        "option",
        "railway",
        "validation",
        "memoization",
        "lazy-sequences",
    ]


def test_get_example_success_is_case_insensitive() -> None:
    result = get_example(" Railway ")
    assert isinstance(result, Ok)
    assert result.value.title == "Railway-Oriented Programming"


def test_get_example_unknown_name_fails_with_available_names() -> None:
    result = get_example("monads")
    assert isinstance(result, Err)
    assert "Unknown example 'monads'" in result.error
    assert "railway" in result.error


def test_example_runs_against_supplied_console() -> None:
    buffer = io.StringIO()
    EXAMPLES["railway"].run(Console(file=buffer, width=120))
    assert "Success result: 10" in buffer.getvalue()


def test_example_info_is_immutable_and_validated() -> None:
    info = EXAMPLES["option"]
    with pytest.raises(ValidationError):
        info.title = "changed"  # type: ignore[misc]
    with pytest.raises(ValidationError):
        ExampleInfo(name="Bad Name", title="x", runner=lambda console: None)
