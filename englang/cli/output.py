"""
Output formatting for CLI operations.

Status lines go through ``rich`` consoles: successes to stdout, failures
and warnings to stderr.
"""

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False)
error_console = Console(stderr=True, highlight=False)


def print_success(message: str) -> None:
    """
    Print success message with checkmark prefix.

    Examples:
        >>> print_success("Compilation successful: page.html")  # doctest: +SKIP
        ✓ Compilation successful: page.html
    """
    console.print(f"[green]✓[/green] {escape(message)}", soft_wrap=True)


def print_error(message: str) -> None:
    """Print error message with cross prefix to stderr."""
    error_console.print(f"[red]✗[/red] {escape(message)}", soft_wrap=True)


def print_warning(message: str) -> None:
    error_console.print(f"[yellow]warning:[/yellow] {escape(message)}", soft_wrap=True)


def print_text(text: str) -> None:
    """Print generated source verbatim (no markup, no wrapping)."""
    console.print(text, markup=False, soft_wrap=True, end="")
