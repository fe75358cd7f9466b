"""Rich console utilities for the exprguard command line."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from exprguard.domain.models import TransformedOperation

# Shared console instances
console = Console()
error_console = Console(stderr=True)


def print_error(message: str, hint: str | None = None) -> None:
    """Print formatted error message to stderr."""
    content = Text(f"ERROR: {message}", style="bold red")
    if hint:
        content.append(f"\n\nHint: {hint}", style="yellow")
    error_console.print(Panel(content, title="Error", border_style="red"))


def print_success(message: str) -> None:
    console.print(Panel(Text(message), title="Success", border_style="green"))


def print_failure(message: str, details: str | None = None) -> None:
    content = Text(message, style="bold red")
    if details:
        content.append(f"\n{details}", style="dim")
    console.print(Panel(content, title="Rejected", border_style="red"))


def print_watch_set(attribute_names: Iterable[str]) -> None:
    """Print the watched attributes, one per line."""
    names = sorted(attribute_names)
    console.print("\n[bold]Watched attributes:[/bold]")
    if not names:
        console.print("  [dim](none)[/dim]")
    for name in names:
        console.print(f"  {name}")


def print_decision(address: str, transformed: TransformedOperation) -> None:
    """Print the rejection decision attached to an operation."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    policy = transformed.rejection_policy
    table.add_row("Operation", transformed.operation.name)
    table.add_row("Address", address)
    table.add_row("Decision", "reject" if policy.rejects else "accept")
    if policy.rejects:
        table.add_row("Attributes", ", ".join(sorted(policy.attributes)))

    console.print(table)
