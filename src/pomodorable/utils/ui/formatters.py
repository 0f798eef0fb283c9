"""Output formatters for messages, countdowns and settings tables."""

from datetime import timedelta
from typing import Any

from rich.table import Table

from .console import get_console

console = get_console()


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_countdown(remaining: timedelta) -> str:
    """Format a duration as MM:SS, rounding partial seconds down."""
    total_seconds = max(0, int(remaining.total_seconds()))
    mins = total_seconds // 60
    secs = total_seconds % 60
    return f"{mins:02d}:{secs:02d}"


def get_progress_bar(fraction: float, width: int = 40) -> str:
    """Get a progress bar representation for a fraction in [0, 1]."""
    fraction = min(1.0, max(0.0, fraction))
    filled = int(width * fraction)
    empty = width - filled
    return "▓" * filled + "░" * empty


def _flatten(data: dict, prefix: str = "") -> list[tuple[str, Any]]:
    rows: list[tuple[str, Any]] = []
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict) and value:
            rows.extend(_flatten(value, prefix=f"{full_key}."))
        else:
            rows.append((full_key, value))
    return rows


def format_dict_table(data: dict, title: str | None = None) -> None:
    """Display a (nested) dict as a two-column key/value table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    for key, value in _flatten(data):
        if isinstance(value, list):
            formatted_value = ", ".join(str(v) for v in value) or "-"
        elif value is None:
            formatted_value = "[dim]-[/dim]"
        else:
            formatted_value = str(value)
        table.add_row(key, formatted_value)

    console.print(table)
