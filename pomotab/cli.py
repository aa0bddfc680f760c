"""pomotab CLI -- a tabbed Pomodoro timer for the terminal."""

from __future__ import annotations

import sys
from typing import Optional

import typer
from rich.table import Table

from pomotab import display
from pomotab.clock import ClockError
from pomotab.config import load_config, setup_logging
from pomotab.keys import KEY_NAMES
from pomotab.loop import run_app
from pomotab.models import TimerMode

app = typer.Typer(
    name="pomotab",
    help="Work intervals and breaks, one tab at a time.",
    no_args_is_help=True,
)

_MODE_NAMES: dict[str, TimerMode] = {
    "work": TimerMode.WORK,
    "short": TimerMode.SHORT_BREAK,
    "long": TimerMode.LONG_BREAK,
}


def _interactive() -> bool:
    return sys.stdin.isatty()


@app.command()
def start(
    mode: str = typer.Option("work", "--mode", "-m", help="Tab to show first: work, short or long"),
    no_notify: bool = typer.Option(False, "--no-notify", help="Do not send desktop notifications"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output (needs --log-file)"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Write logs to this file"),
) -> None:
    """Open the timer."""
    initial = _MODE_NAMES.get(mode.lower())
    if initial is None:
        display.print_warning(f"Unknown mode '{mode}'. Use work, short or long.")
        raise typer.Exit(1)

    if not _interactive():
        display.print_warning("pomotab needs an interactive terminal.")
        raise typer.Exit(1)

    config = load_config()
    if no_notify:
        config.notifications = False
    setup_logging("DEBUG" if verbose else config.log_level, log_file or config.log_file)

    try:
        run_app(config, initial_mode=initial)
    except ClockError as exc:
        display.print_warning(f"Timer stopped: {exc}")
        raise typer.Exit(1)


@app.command()
def modes() -> None:
    """List the interval types and their durations."""
    display.print_modes()


@app.command()
def keys() -> None:
    """Show the key bindings."""
    table = Table(title="Keys", border_style="blue")
    table.add_column("Action")
    table.add_column("Keys")
    for command, names in KEY_NAMES.items():
        table.add_row(command.value.replace("_", " "), ", ".join(names))
    display.console.print(table)
