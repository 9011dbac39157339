"""
Command-line interface for funcpatterns.

Lists and runs the pattern demonstrations:

    funcpatterns list
    funcpatterns run railway validation
    funcpatterns run-all
"""

import logging
import sys
from typing import Annotated

import typer
from rich import print as rprint
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

from . import __version__
from .app import config
from .core.result import Err, Ok
from .examples import EXAMPLES, get_example
from .logging_setup import configure_logging
from .models import ExampleInfo

console = Console(highlight=False)
logger = logging.getLogger(__name__)

app = typer.Typer(
    name="funcpatterns",
    help="Runnable demonstrations of functional programming patterns.",
    add_completion=False,
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        rprint(f"[bold blue]funcpatterns[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    configure_logging(verbose)


def _run_example(info: ExampleInfo) -> None:
    console.print(Rule(f"[{config.RICH_TITLE_STYLE}]{info.title}[/{config.RICH_TITLE_STYLE}]"))
    logger.debug("Running example %s", info.name)
    info.run(console)


@app.command("list")
def list_examples() -> None:
    """List the available examples."""
    table = Table(title="Examples")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Summary")
    for info in EXAMPLES.values():
        table.add_row(info.name, info.title, info.summary)
    console.print(table)


@app.command()
def run(
    names: Annotated[
        list[str],
        typer.Argument(help="Names of the examples to run", metavar="NAME..."),
    ],
) -> None:
    """Run one or more examples by name."""
    for name in names:
        match get_example(name):
            case Ok(info):
                _run_example(info)
            case Err(error):
                console.print(
                    Panel(f"[bold red]Error:[/bold red] {error}", border_style="red")
                )
                raise typer.Exit(code=1)


@app.command("run-all")
def run_all() -> None:
    """Run every example in order."""
    for info in EXAMPLES.values():
        _run_example(info)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(
        Panel(
            f"[bold blue]funcpatterns[/bold blue]\n\n"
            f"Version: [green]{__version__}[/green]\n"
            f"Python: [yellow]{sys.version.split()[0]}[/yellow]",
            title="About",
            border_style="blue",
        )
    )


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
