"""Keyboard input: raw keys to the five user commands."""

from __future__ import annotations

import enum
import logging
import os
import select
import sys
import termios
import tty
from typing import Optional, TextIO

from pomotab.models import Event

log = logging.getLogger(__name__)


class Command(str, enum.Enum):
    """Everything the user can ask for."""

    NEXT_TAB = "next_tab"
    PREV_TAB = "prev_tab"
    TOGGLE = "toggle"
    RESET = "reset"
    QUIT = "quit"


# QUIT is handled by the loop itself and has no state-machine event.
COMMAND_EVENTS: dict[Command, Event] = {
    Command.NEXT_TAB: Event.NAVIGATE_NEXT,
    Command.PREV_TAB: Event.NAVIGATE_PREV,
    Command.TOGGLE: Event.TOGGLE_RUN,
    Command.RESET: Event.RESET,
}

KEY_BINDINGS: dict[str, Command] = {
    "\x1b[C": Command.NEXT_TAB,  # right arrow
    "\x1bOC": Command.NEXT_TAB,
    "d": Command.NEXT_TAB,
    "\t": Command.NEXT_TAB,
    "\x1b[D": Command.PREV_TAB,  # left arrow
    "\x1bOD": Command.PREV_TAB,
    "a": Command.PREV_TAB,
    " ": Command.TOGGLE,
    "r": Command.RESET,
    "q": Command.QUIT,
    "\x03": Command.QUIT,  # ctrl+c
}

# Human-readable names for the bindings above, for `pomotab keys`.
KEY_NAMES: dict[Command, list[str]] = {
    Command.NEXT_TAB: ["right", "d", "tab"],
    Command.PREV_TAB: ["left", "a"],
    Command.TOGGLE: ["space"],
    Command.RESET: ["r"],
    Command.QUIT: ["q", "ctrl+c"],
}


def decode_key(raw: str) -> Optional[Command]:
    """Map one raw key (or escape sequence) to a command, or None if unbound."""
    if not raw:
        return None
    if raw.startswith("\x1b"):
        return KEY_BINDINGS.get(raw)
    return KEY_BINDINGS.get(raw.lower())


class KeyReader:
    """Non-blocking single-key reader for a POSIX terminal.

    Puts the terminal in cbreak mode on :meth:`start` and restores it on
    :meth:`stop`. Without a usable terminal it simply never returns a key.
    """

    def __init__(self, stream: TextIO = sys.stdin) -> None:
        self._stream = stream
        self._old_settings = None
        self.enabled = False

    def start(self) -> None:
        try:
            fd = self._stream.fileno()
            self._old_settings = termios.tcgetattr(fd)
            tty.setcbreak(fd)
            self.enabled = True
        except (termios.error, OSError, ValueError) as exc:
            log.warning("Keyboard input unavailable: %s", exc)
            self.enabled = False

    def stop(self) -> None:
        if self._old_settings is not None:
            try:
                termios.tcsetattr(self._stream.fileno(), termios.TCSADRAIN, self._old_settings)
            except (termios.error, OSError, ValueError) as exc:
                log.warning("Could not restore terminal settings: %s", exc)
            self._old_settings = None
        self.enabled = False

    def _ready(self, fd: int, timeout: float) -> bool:
        return bool(select.select([fd], [], [], timeout)[0])

    def read_key(self, timeout: float = 0.1) -> Optional[str]:
        """Return the next raw key, waiting up to ``timeout`` seconds."""
        if not self.enabled:
            return None
        # Read the descriptor directly: the text wrapper would swallow the
        # rest of an escape sequence into its buffer, out of select()'s sight.
        fd = self._stream.fileno()
        if not self._ready(fd, timeout):
            return None
        data = os.read(fd, 1)
        if data == b"\x1b":
            # Arrow keys arrive as ESC [ X; collect the rest if it is there.
            while len(data) < 3 and self._ready(fd, 0.01):
                data += os.read(fd, 1)
        return data.decode("utf-8", errors="ignore")

    def read_command(self, timeout: float = 0.1) -> Optional[Command]:
        key = self.read_key(timeout)
        if key is None:
            return None
        command = decode_key(key)
        if command is None:
            log.debug("Unbound key %r", key)
        return command
