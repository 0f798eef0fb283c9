"""Command 'run' of pomodorable - the full-screen focus timer."""

import random

import typer

from pomodorable.models.focus.timer import FocusTimer
from pomodorable.models.focus.ui import TimerDisplay, show_summary
from pomodorable.services.config_service import get_config_service
from pomodorable.utils.logger import get_logger, set_log_level
from pomodorable.utils.ui.console import get_console

from .decorators import AppError, command_wrapper

app = typer.Typer()


@app.command("run")
@command_wrapper
def run_command(
    focus: int | None = typer.Option(
        None, "--focus", "-f", help="Focus length in minutes"
    ),
    short_break: int | None = typer.Option(
        None, "--short-break", "-s", help="Short break length in minutes"
    ),
    long_break: int | None = typer.Option(
        None, "--long-break", "-l", help="Long break length in minutes"
    ),
    long_break_interval: int | None = typer.Option(
        None,
        "--long-break-interval",
        "-i",
        help="Take a long break after every N focus intervals",
    ),
    target: int | None = typer.Option(
        None, "--target", "-t", help="Focus intervals in the whole session"
    ),
    seed: int | None = typer.Option(
        None, "--seed", help="Seed for reproducible quote picks"
    ),
    autostart: bool = typer.Option(
        False, "--autostart", help="Start the first focus interval immediately"
    ),
) -> None:
    """Run the Pomodoro timer.

    Keys: space start/pause, r reset, n next interval, q quit.
    """
    config = get_config_service().config
    set_log_level(config.logging.level)

    try:
        settings = config.timer.to_settings(
            focus_length=focus,
            short_break_length=short_break,
            long_break_length=long_break,
            long_break_interval=long_break_interval,
            interval_target=target,
        )
    except ValueError as e:
        raise AppError(f"Invalid timer settings: {e}") from e

    rng = random.Random(seed) if seed is not None else None
    timer = FocusTimer.with_settings(settings, rng=rng, quotes=config.quotes)
    if autostart:
        timer.toggle()

    logger = get_logger("timer")
    logger.info("Session created with settings %s", settings.to_dict())

    console = get_console(color=config.ui.color)
    display = TimerDisplay(console, show_quotes=config.ui.show_quotes, logger=logger)
    display.run_timer(timer, refresh_interval=config.ui.refresh_interval_ms / 1000)

    show_summary(timer, console)
