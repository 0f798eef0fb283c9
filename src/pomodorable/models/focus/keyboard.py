"""Non-blocking keyboard input and the timer's key bindings."""

import sys
from typing import Literal, Optional

KeyCommand = Literal["toggle", "reset", "skip", "quit"]

ESCAPE = "\x1b"

KEY_BINDINGS: dict[str, KeyCommand] = {
    " ": "toggle",
    "r": "reset",
    "n": "skip",
    "q": "quit",
    ESCAPE: "quit",
}


def command_for_key(key: Optional[str]) -> Optional[KeyCommand]:
    """Translate a keypress into a timer command, or None if unbound."""
    if key is None:
        return None
    return KEY_BINDINGS.get(key)


class KeyboardHandler:
    """Reads single keypresses from a POSIX terminal without blocking.

    Puts the terminal in cbreak mode on enter and restores it on exit.
    """

    def __init__(self):
        self.fd = sys.stdin.fileno()
        self.old_settings = None

    def __enter__(self) -> "KeyboardHandler":
        try:
            import termios
            import tty

            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except Exception:
            # stdin is not a TTY (piped input, CI)
            self.old_settings = None
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def get_key(self) -> Optional[str]:
        """Return the pending key (lowercased), or None if nothing was pressed."""
        try:
            import select

            ready, _, _ = select.select([sys.stdin], [], [], 0)
        except Exception:
            return None
        if not ready:
            return None
        return sys.stdin.read(1).lower()

    def stop(self) -> None:
        """Restore the terminal settings saved on enter."""
        if not self.old_settings:
            return
        try:
            import termios

            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
        except Exception:
            pass
        finally:
            self.old_settings = None


class WindowsKeyboardHandler:
    """Keyboard handler for Windows consoles using msvcrt."""

    def __init__(self):
        try:
            import msvcrt

            self.msvcrt = msvcrt
        except ImportError:
            self.msvcrt = None

    def __enter__(self) -> "WindowsKeyboardHandler":
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def get_key(self) -> Optional[str]:
        if not self.msvcrt or not self.msvcrt.kbhit():
            return None
        key = self.msvcrt.getch()
        if isinstance(key, bytes):
            key = key.decode("utf-8", errors="ignore")
        return key.lower()

    def stop(self) -> None:
        pass


def get_keyboard_handler():
    """Return the keyboard handler for the current platform."""
    if sys.platform.startswith("win"):
        return WindowsKeyboardHandler()
    return KeyboardHandler()
