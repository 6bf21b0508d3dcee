"""
Output formatting utilities for the CLI.

Provides consistent output formatting across all CLI commands.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

# Global console instances
console = Console()
err_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]i[/blue] {message}")


def print_plain(text: str) -> None:
    """
    Write text to stdout exactly as given.

    Bypasses rich rendering, which would otherwise substitute emoji codes
    and expand tabs.
    """
    console.file.write(f"{text}\n")
    console.file.flush()


def configure_logging(verbose: bool = False) -> None:
    """Route walkpwd log records to stderr through rich."""
    handler = RichHandler(console=err_console, show_path=False)
    root = logging.getLogger("walkpwd")
    root.handlers = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
