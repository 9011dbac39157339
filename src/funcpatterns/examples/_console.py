from rich.console import Console


def resolve_console(console: Console | None) -> Console:
    """Returns `console`, or a plain stdout console when none is given."""
    return console if console is not None else Console(highlight=False)
