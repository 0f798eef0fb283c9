"""Main entry point for Pomodorable."""

import typer

from pomodorable import __version__
from pomodorable.commands import config_command, run_command
from pomodorable.utils.typer_helpers import SuggestingGroup
from pomodorable.utils.ui.console import get_console

app = typer.Typer(
    name="pomodorable",
    cls=SuggestingGroup,
    help="A Pomodoro focus timer for the terminal",
    no_args_is_help=True,
)

console = get_console()

app.command("run")(run_command.run_command)
app.add_typer(config_command.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Pomodorable[/bold] version [cyan]{__version__}[/cyan]")


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
