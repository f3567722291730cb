"""Allow `python -m quick_notes`."""

from quick_notes.cli.main import cli

if __name__ == "__main__":
    cli()
