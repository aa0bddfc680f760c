"""Rich terminal rendering of a timer snapshot."""

from __future__ import annotations

import io

from rich import box
from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from pomotab.machine import MODES, ModeTable, remaining
from pomotab.models import RunStatus, TimerMode, TimerState

console = Console()

HIGHLIGHT_COLOR = "#7D56F4"
SPECIAL_COLOR = "#73F59F"
RUNNING_MARKER = "▶"

_TAB_PADDING = 5
_BAR_WIDTH = 30

KEY_HINTS = "←/a prev  •  →/d/tab next  •  space start/pause  •  r reset  •  q quit"


def format_remaining(seconds: int) -> str:
    """Format seconds as MM:SS (H:MM:SS past an hour)."""
    seconds = max(0, seconds)
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


def _tab_text(mode: TimerMode, state: TimerState, modes: ModeTable) -> Text:
    label = modes[mode].label
    if state.status == RunStatus.RUNNING and state.active_mode == mode:
        return Text(f"{RUNNING_MARKER} {label}", style=f"bold {SPECIAL_COLOR}")
    if mode == state.viewed_mode:
        return Text(label, style="bold")
    return Text(label, style="dim")


def _tab(mode: TimerMode, state: TimerState, modes: ModeTable) -> Panel:
    is_viewed = mode == state.viewed_mode
    return Panel.fit(
        _tab_text(mode, state, modes),
        box=box.ROUNDED if is_viewed else box.SQUARE,
        border_style=HIGHLIGHT_COLOR if is_viewed else "dim",
        padding=(0, _TAB_PADDING),
    )


def _strip_width(state: TimerState, modes: ModeTable) -> int:
    # Each tab is its text plus padding and two border cells.
    return sum(_tab_text(mode, state, modes).cell_len + 2 * _TAB_PADDING + 2 for mode in TimerMode)


def render_tabs(state: TimerState, modes: ModeTable = MODES) -> Table:
    """Render the row of mode tabs."""
    row = Table.grid(padding=0)
    for _ in TimerMode:
        row.add_column()
    row.add_row(*(_tab(mode, state, modes) for mode in TimerMode))
    return row


def _status_line(state: TimerState, modes: ModeTable) -> Text:
    if state.is_idle:
        return Text("Ready", style="dim")
    if state.viewing_active:
        if state.status == RunStatus.PAUSED:
            return Text("Paused", style="yellow")
        return Text("Running", style=SPECIAL_COLOR)
    active = modes[state.active_mode].label  # type: ignore[index]
    return Text(f"{active} is {state.status.value}", style="dim italic")


def render_window(state: TimerState, modes: ModeTable = MODES) -> Panel:
    """Render the viewed mode's progress bar and remaining time."""
    viewed = state.viewed_mode
    fraction = state.fraction if state.viewing_active else 0.0

    line = Table.grid(padding=(0, 1))
    line.add_column()
    line.add_column()
    line.add_row(
        ProgressBar(total=1.0, completed=fraction, width=_BAR_WIDTH),
        Text(format_remaining(remaining(state, viewed, modes)), style="bold"),
    )
    body = Group(Align.center(line), Align.center(_status_line(state, modes)))
    return Panel(
        body,
        box=box.SQUARE,
        border_style=HIGHLIGHT_COLOR,
        padding=(2, 0),
        width=max(_strip_width(state, modes), _BAR_WIDTH + 10),
    )


def render(state: TimerState, modes: ModeTable = MODES) -> RenderableType:
    """Render the full screen for ``state``. Never mutates the state."""
    return Panel(
        Group(
            render_tabs(state, modes),
            render_window(state, modes),
            Align.center(Text(KEY_HINTS, style="dim")),
        ),
        box=box.MINIMAL,
        padding=(1, 2),
        expand=False,
    )


def render_text(state: TimerState, modes: ModeTable = MODES, width: int = 100) -> str:
    """Render ``state`` to plain text (no colours)."""
    buffer = io.StringIO()
    plain = Console(file=buffer, width=width, color_system=None, force_terminal=False)
    plain.print(render(state, modes))
    return buffer.getvalue()


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]{message}[/yellow]")


def print_modes(modes: ModeTable = MODES) -> None:
    """Print a table of modes and their durations."""
    table = Table(title="Modes", border_style="blue")
    table.add_column("#", justify="right")
    table.add_column("Mode")
    table.add_column("Duration", justify="right")
    for mode in TimerMode:
        spec = modes[mode]
        table.add_row(str(mode.value + 1), spec.label, format_remaining(spec.seconds))
    console.print(table)
