"""
logging_utils.py

Logging helpers shared by the CLI and the command handlers.

Two levels are supported:

    • verbose: short, plain-English progress messages
      (e.g., "Opening database...", "3 notes matched.")
    • debug: raw statements and bound parameters sent to SQLite

Output goes through Typer's echo function so it behaves the same way as
the rest of the CLI output (and is captured by Typer's CliRunner in tests).
"""

import typer


def log_verbose(message: str, verbose: bool) -> None:
    """
    Print a high-level progress message when verbose mode is enabled.

    Parameters
    ----------
    message : str
        The human-readable message to display.

    verbose : bool
        Whether verbose mode is active. When False, this function does
        nothing.
    """
    if verbose:
        typer.echo(message)


def log_debug(message: str, debug: bool) -> None:
    """Print a `[debug]`-prefixed message when debug mode is enabled."""
    if debug:
        typer.echo(f"[debug] {message}")
