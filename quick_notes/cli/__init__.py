"""Typer command-line interface for quick-notes (see main.py)."""
