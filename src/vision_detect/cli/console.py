"""Shared console utilities for CLI commands."""

from rich.console import Console
from rich.markup import escape

# Shared console instance for status messages
console = Console()


def error(msg: str) -> None:
    """Print an error message in red."""
    console.print(f"[red]{escape(msg)}[/red]", highlight=False)


def dim(msg: str) -> None:
    """Print a dimmed message."""
    console.print(f"[dim]{escape(msg)}[/dim]", highlight=False)
