"""Configuration management commands."""

import json

import typer

from pomodorable.services.config_service import get_config_service
from pomodorable.utils.ui.console import get_console
from pomodorable.utils.ui.formatters import format_dict_table, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console()


def _parse_value(value: str):
    """Interpret a CLI value as JSON where possible (numbers, bools, lists)."""
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value


@app.command("view")
@command_wrapper
def view_config() -> None:
    """View current configuration."""
    service = get_config_service()
    format_dict_table(service.config.model_dump(), title=str(service.config_path))


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., timer.focus_length)"),
) -> None:
    """Get a configuration value."""
    try:
        value = get_config_service().get(key)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found") from e
    if isinstance(value, (dict, list)):
        console.print_json(json.dumps(value))
    else:
        console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., timer.focus_length)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    parsed_value = _parse_value(value)
    try:
        get_config_service().set(key, parsed_value)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found") from e
    except ValueError as e:
        raise AppError(str(e)) from e
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: str | None = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        if not typer.confirm(f"Are you sure you want to reset {msg}?"):
            console.print("[yellow]Cancelled[/yellow]")
            raise typer.Exit(0)

    try:
        get_config_service().reset(key)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found") from e

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
