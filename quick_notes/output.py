"""
Output utilities for the CLI.

Coloured status messages built on a shared Rich console. Every helper
accepts an optional `console` so handlers and tests can redirect output.
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape

# Global console instance
console = Console()


def _target(out: Optional[Console]) -> Console:
    return out if out is not None else console


def print_error(message: str, out: Optional[Console] = None) -> None:
    """Print error message in red."""
    _target(out).print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)


def print_failure(message: str, out: Optional[Console] = None) -> None:
    """Print a storage failure message entirely in red."""
    _target(out).print(f"[red]{escape(message)}[/red]", highlight=False)


def print_success(message: str, out: Optional[Console] = None) -> None:
    """Print success message in green."""
    _target(out).print(f"[green]{escape(message)}[/green]", highlight=False)


def print_info(message: str, out: Optional[Console] = None) -> None:
    """Print info message in blue."""
    _target(out).print(f"[blue]{escape(message)}[/blue]", highlight=False)
