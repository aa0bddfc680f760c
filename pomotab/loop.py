"""Serial event loop: feeds keys and ticks through the state machine."""

from __future__ import annotations

import logging
import queue
import threading
from typing import Callable, Optional, Union

from rich.live import Live

from pomotab.clock import ClockError, TickClock
from pomotab.display import console, render
from pomotab.encouragement import completion_message
from pomotab.keys import COMMAND_EVENTS, Command, KeyReader
from pomotab.machine import MODES, ModeTable, initial_state, transition
from pomotab.models import AppConfig, Effect, Event, TimerMode, TimerState
from pomotab.notify import notify

log = logging.getLogger(__name__)

Notifier = Callable[[str, str], None]
ClockFactory = Callable[[Callable[[], None]], TickClock]


class EventLoop:
    """Owns the current :class:`TimerState` and applies one event at a time.

    Other threads (the tick timer, the key reader) only call :meth:`post_tick`
    and :meth:`post_command`; all transitions happen on the thread running
    :meth:`run`.
    """

    def __init__(
        self,
        state: TimerState,
        modes: ModeTable = MODES,
        clock_factory: ClockFactory = TickClock,
        notifier: Optional[Notifier] = notify,
        on_render: Optional[Callable[[TimerState], None]] = None,
        on_bell: Optional[Callable[[], None]] = None,
    ) -> None:
        self.state = state
        self.modes = modes
        self.completions = 0
        self._queue: queue.Queue[Union[Event, Command]] = queue.Queue()
        self._clock = clock_factory(self.post_tick)
        self._notifier = notifier
        self._on_render = on_render
        self._on_bell = on_bell

    def post_tick(self) -> None:
        self._queue.put(Event.TICK)

    def post_command(self, command: Command) -> None:
        if command == Command.QUIT:
            self._queue.put(Command.QUIT)
        else:
            self._queue.put(COMMAND_EVENTS[command])

    def step(self, event: Event) -> Effect:
        """Apply a single event, carry out its effect and redraw."""
        self.state, effect = transition(self.state, event, self.modes)
        log.debug("%s -> %s (%s)", event.value, self.state.status.value, effect.value)

        if effect == Effect.SCHEDULE_TICK:
            try:
                self._clock.arm()
            except ClockError:
                log.critical("Tick clock failed; stopping", exc_info=True)
                raise
        elif effect == Effect.FIRE_COMPLETION:
            self._complete()

        self._render()
        return effect

    def _complete(self) -> None:
        mode = self.state.active_mode
        if mode is None:
            return
        self.completions += 1
        spec = self.modes[mode]
        log.info("%s finished after %ds", spec.label, self.state.elapsed)

        if self._on_bell is not None:
            self._on_bell()
        if self._notifier is not None:
            self._notifier(spec.done_title, completion_message(mode))
        self._queue.put(Event.COMPLETION_ACKNOWLEDGED)

    def _render(self) -> None:
        if self._on_render is not None:
            self._on_render(self.state)

    def run(self) -> TimerState:
        """Process events until QUIT. Returns the final state."""
        self._render()
        try:
            while True:
                item = self._queue.get()
                if item == Command.QUIT:
                    log.info("Quit requested")
                    break
                self.step(item)  # type: ignore[arg-type]
        finally:
            self._clock.close()
        return self.state


def _read_keys(reader: KeyReader, loop: EventLoop, stop: threading.Event) -> None:
    while not stop.is_set():
        command = reader.read_command(timeout=0.1)
        if command is not None:
            loop.post_command(command)


def run_app(
    config: AppConfig,
    initial_mode: TimerMode = TimerMode.WORK,
    modes: ModeTable = MODES,
) -> TimerState:
    """Run the full-screen timer until the user quits."""
    state = initial_state(initial_mode)
    reader = KeyReader()
    stop = threading.Event()

    with Live(render(state, modes), console=console, screen=True, auto_refresh=False) as live:

        def redraw(snapshot: TimerState) -> None:
            live.update(render(snapshot, modes), refresh=True)

        loop = EventLoop(
            state,
            modes=modes,
            notifier=notify if config.notifications else None,
            on_render=redraw,
            on_bell=console.bell if config.bell else None,
        )
        reader.start()
        keys = threading.Thread(target=_read_keys, args=(reader, loop, stop), name="pomotab-keys", daemon=True)
        keys.start()
        try:
            return loop.run()
        except KeyboardInterrupt:
            log.info("Interrupted")
            return loop.state
        finally:
            stop.set()
            keys.join(timeout=1.0)
            reader.stop()
