"""Full-screen terminal host for the focus timer."""

import logging
import time

from rich.align import Align
from rich.console import Console, Group
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from pomodorable import __version__
from pomodorable.utils.ui.formatters import format_countdown, get_progress_bar

from .cycling import PHASE_LABELS
from .keyboard import command_for_key, get_keyboard_handler
from .timer import FocusTimer

PHASE_COLORS = {
    "ready": "cyan",
    "focus": "red",
    "short_break": "green",
    "long_break": "blue",
    "finished": "magenta",
}


class TimerDisplay:
    """Renders a FocusTimer and drives it from the keyboard."""

    def __init__(
        self,
        console: Console | None = None,
        *,
        show_quotes: bool = True,
        logger: logging.Logger | None = None,
    ):
        self.console = console or Console()
        self.show_quotes = show_quotes
        self._logger = logger or logging.getLogger("pomodorable.ui")

    def create_layout(self, timer: FocusTimer) -> Layout:
        """Create the timer layout with all components."""
        layout = Layout()
        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="body"),
            Layout(name="footer", size=3),
        )

        header_text = Text(
            f"Pomodorable v{__version__}", style="bold cyan", justify="center"
        )
        layout["header"].update(Align.center(header_text, vertical="middle"))

        layout["body"].update(
            Align.center(self._create_body_content(timer), vertical="middle")
        )

        layout["footer"].update(
            Align.center(self._create_footer_text(timer), vertical="middle")
        )

        return layout

    def _create_body_content(self, timer: FocusTimer) -> Group:
        """Create the main body content."""
        phase = timer.current_phase()
        color = PHASE_COLORS[phase]
        components = []

        label = PHASE_LABELS[phase]
        if not timer.is_running() and phase not in ("ready", "finished"):
            label = f"{label} (paused)"
        components.append(Text(label, style=f"bold {color}", justify="center"))
        components.append(Text(""))

        if self.show_quotes:
            components.append(
                Text(timer.current_quote(), style="italic", justify="center")
            )
            components.append(Text(""))

        countdown = Text(justify="center")
        countdown.append(format_countdown(timer.remaining()), style=f"bold {color}")
        countdown.append("    ")
        countdown.append(timer.interval_label(), style="bold")
        components.append(countdown)
        components.append(Text(""))

        progress_pct = int(timer.progress() * 100)
        progress_text = Text(justify="center")
        progress_text.append(
            get_progress_bar(timer.progress()) + f"  {progress_pct}%", style="dim"
        )
        components.append(progress_text)

        return Group(*components)

    def _create_footer_text(self, timer: FocusTimer) -> Text:
        """Create footer with keyboard hints for the commands available now."""
        phase = timer.current_phase()
        hints = []
        if phase != "ready":
            hints.append("'r' reset")
        hints.append("space pause" if timer.is_running() else "space start")
        if phase != "finished":
            hints.append("'n' next interval")
        hints.append("'q' quit")

        return Text("  •  ".join(hints), style="dim", justify="center")

    def handle_command(self, timer: FocusTimer, command: str) -> None:
        """Apply a keyboard command to the timer."""
        phase_before = timer.current_phase()
        if command == "toggle":
            timer.toggle()
            self._logger.info(
                "Timer %s in phase %s",
                "started" if timer.is_running() else "paused",
                timer.current_phase(),
            )
        elif command == "reset":
            timer.reset_command()
            if phase_before != "ready":
                self._logger.info("Session reset from phase %s", phase_before)
        elif command == "skip":
            timer.skip_command()
            if phase_before != timer.current_phase():
                self._logger.info(
                    "Skipped %s -> %s", phase_before, timer.current_phase()
                )

    def run_timer(
        self,
        timer: FocusTimer,
        *,
        refresh_interval: float = 0.1,
    ) -> str:
        """
        Run the fullscreen timer until the user quits.

        Ticks are delivered every *refresh_interval* seconds while the timer
        is running. Returns 'quit' or 'interrupted'.
        """
        try:
            with get_keyboard_handler() as keyboard, Live(
                self.create_layout(timer),
                console=self.console,
                refresh_per_second=max(1, int(1 / refresh_interval)),
                screen=True,
            ) as live:
                while True:
                    command = command_for_key(keyboard.get_key())
                    if command == "quit":
                        self._logger.info(
                            "Quit in phase %s after %d interval(s)",
                            timer.current_phase(),
                            timer.completed_intervals(),
                        )
                        return "quit"
                    if command:
                        self.handle_command(timer, command)

                    if timer.is_running():
                        self._tick(timer)

                    live.update(self.create_layout(timer))
                    time.sleep(refresh_interval)

        except KeyboardInterrupt:
            self._logger.info("Interrupted in phase %s", timer.current_phase())
            return "interrupted"

    def _tick(self, timer: FocusTimer) -> None:
        phase_before = timer.current_phase()
        if timer.tick(timer.clock()):
            self._logger.info(
                "Phase complete: %s -> %s (%d/%d intervals)",
                phase_before,
                timer.current_phase(),
                timer.completed_intervals(),
                timer.interval_target(),
            )
            if timer.current_phase() == "finished":
                self._logger.info("Session finished")
        elif not timer.is_running():
            self._logger.info("Timer stopped: session finished")


def show_summary(timer: FocusTimer, console: Console | None = None) -> None:
    """Show a summary panel after the timer window closes."""
    console = console or Console()

    phase = timer.current_phase()
    if phase == "finished":
        title = "[bold green]Session complete![/bold green]"
        border = "green"
    else:
        title = "[yellow]Session stopped[/yellow]"
        border = "yellow"

    panel = Panel(
        f"""{title}

Phase: {PHASE_LABELS[phase]}
Completed intervals: {timer.completed_intervals()}/{timer.interval_target()}""",
        border_style=border,
        padding=(1, 2),
    )

    console.print(panel)
