"""Timer state machine: how one countdown advances, pauses and completes.

Every change to a :class:`~pomotab.models.TimerState` goes through
:func:`transition`. It is pure: given a state and an event it returns the
next state plus at most one follow-up :class:`~pomotab.models.Effect` for the
event loop to carry out (arm the next tick, or fire the completion
notification). It never sleeps, schedules or notifies by itself.

Time advances in whole ticks of one second. A running countdown only keeps
going because each tick asks for the next one; "stopping" is simply not
asking again.
"""

from __future__ import annotations

import logging
from typing import Mapping

from pomotab.models import Effect, Event, ModeSpec, RunStatus, TimerMode, TimerState

log = logging.getLogger(__name__)

MODES: dict[TimerMode, ModeSpec] = {
    TimerMode.WORK: ModeSpec(label="Pomodoro", seconds=25 * 60, done_title="Pomodoro done"),
    TimerMode.SHORT_BREAK: ModeSpec(label="Short break", seconds=5 * 60, done_title="Short break over"),
    TimerMode.LONG_BREAK: ModeSpec(label="Long break", seconds=15 * 60, done_title="Long break over"),
}

ModeTable = Mapping[TimerMode, ModeSpec]


def initial_state(viewed: TimerMode = TimerMode.WORK) -> TimerState:
    """Return the start-of-process state: idle, ``viewed`` tab shown."""
    return TimerState(viewed_mode=viewed)


def target(mode: TimerMode, modes: ModeTable = MODES) -> int:
    """Target duration of ``mode`` in seconds."""
    return modes[mode].seconds


def remaining(state: TimerState, mode: TimerMode, modes: ModeTable = MODES) -> int:
    """Seconds left on ``mode`` as shown on its tab.

    Only the active mode has progress; every other mode shows its full target.
    """
    total = target(mode, modes)
    if state.is_idle or state.active_mode != mode:
        return total
    return max(0, total - state.elapsed)


def _reset(state: TimerState) -> TimerState:
    return state.model_copy(
        update={"status": RunStatus.IDLE, "active_mode": None, "elapsed": 0, "fraction": 0.0}
    )


def _navigate(state: TimerState, step: int) -> TimerState:
    mode = state.viewed_mode
    if (step > 0 and mode.is_last) or (step < 0 and mode.is_first):
        return state
    return state.model_copy(update={"viewed_mode": TimerMode.at(mode.value + step)})


def _toggle(state: TimerState) -> tuple[TimerState, Effect]:
    if state.is_idle:
        started = state.model_copy(
            update={"status": RunStatus.RUNNING, "active_mode": state.viewed_mode}
        )
        return started, Effect.SCHEDULE_TICK

    if state.active_mode != state.viewed_mode:
        # Space only acts on the tab that is actually counting.
        return state, Effect.NONE

    if state.status == RunStatus.RUNNING:
        return state.model_copy(update={"status": RunStatus.PAUSED}), Effect.SCHEDULE_TICK
    return state.model_copy(update={"status": RunStatus.RUNNING}), Effect.SCHEDULE_TICK


def _tick(state: TimerState, modes: ModeTable) -> tuple[TimerState, Effect]:
    if state.status != RunStatus.RUNNING or state.active_mode is None:
        return state, Effect.NONE

    # Completion fires one tick after the bar fills so the full bar is drawn first.
    if state.fraction >= 1.0:
        return state, Effect.FIRE_COMPLETION

    elapsed = state.elapsed + 1
    fraction = min(1.0, elapsed / target(state.active_mode, modes))
    return state.model_copy(update={"elapsed": elapsed, "fraction": fraction}), Effect.SCHEDULE_TICK


def transition(
    state: TimerState, event: Event, modes: ModeTable = MODES
) -> tuple[TimerState, Effect]:
    """Apply ``event`` to ``state``. Returns the new state and its follow-up effect."""
    if event == Event.NAVIGATE_NEXT:
        return _navigate(state, 1), Effect.NONE
    if event == Event.NAVIGATE_PREV:
        return _navigate(state, -1), Effect.NONE
    if event in (Event.RESET, Event.COMPLETION_ACKNOWLEDGED):
        return _reset(state), Effect.NONE
    if event == Event.TOGGLE_RUN:
        return _toggle(state)
    if event == Event.TICK:
        return _tick(state, modes)

    log.debug("Ignoring unknown event %r", event)
    return state, Effect.NONE
