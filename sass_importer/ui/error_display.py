"""Clean error display for ambiguous imports."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..errors import AmbiguousImportError
from ..paths import is_partial
from ..paths import pretty_uri


def display_ambiguous_import_error(error: AmbiguousImportError, console: Console | None = None) -> None:
    """Print an ambiguous import as a panel listing every candidate.

    Args:
        error: The ambiguity to display
        console: Console to print to (default: new stderr console)
    """
    console = console or Console(stderr=True)

    content = Text()
    if error.specifier is not None:
        content.append("Import: ", style="dim")
        content.append(error.specifier, style="bold cyan")
        content.append("\n")
    content.append("Result: ", style="dim")
    content.append(f"{len(error.paths)} files match", style="red")

    candidates = Table(show_header=False, box=None, padding=(0, 1))
    candidates.add_column("Index", style="red", width=3)
    candidates.add_column("Path", style="bold")
    candidates.add_column("Kind", style="dim")

    for index, path in enumerate(error.paths, start=1):
        kind = "partial" if is_partial(path) else "plain"
        candidates.add_row(f"{index}.", escape(pretty_uri(path)), kind)

    console.print()
    console.print(
        Panel(
            content,
            title="[bold red]Ambiguous Import[/bold red]",
            border_style="red",
            padding=(1, 2),
        )
    )
    console.print(candidates)
    console.print()
    console.print("[dim]Tip: Remove or rename all but one of these files.[/dim]")
    console.print()
