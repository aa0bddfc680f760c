"""Tests for terminal rendering."""

from __future__ import annotations

import pytest

from pomotab.display import RUNNING_MARKER, format_remaining, render_text
from pomotab.machine import initial_state, transition
from pomotab.models import Event, ModeSpec, RunStatus, TimerMode, TimerState

SHORT_MODES = {
    TimerMode.WORK: ModeSpec(label="Pomodoro", seconds=5, done_title="Pomodoro done"),
    TimerMode.SHORT_BREAK: ModeSpec(label="Short break", seconds=120, done_title="Short break over"),
    TimerMode.LONG_BREAK: ModeSpec(label="Long break", seconds=180, done_title="Long break over"),
}


def advance(state: TimerState, *events: Event) -> TimerState:
    for event in events:
        state, _ = transition(state, event, SHORT_MODES)
    return state


class TestFormatRemaining:
    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [(0, "00:00"), (5, "00:05"), (25 * 60, "25:00"), (3725, "1:02:05"), (-3, "00:00")],
    )
    def test_format(self, seconds: int, expected: str) -> None:
        assert format_remaining(seconds) == expected


class TestRender:
    def test_idle(self) -> None:
        text = render_text(initial_state(), SHORT_MODES)
        for label in ("Pomodoro", "Short break", "Long break"):
            assert label in text
        assert "00:05" in text
        assert "Ready" in text
        assert RUNNING_MARKER not in text

    def test_running_counts_down(self) -> None:
        state = advance(initial_state(), Event.TOGGLE_RUN, Event.TICK, Event.TICK)
        text = render_text(state, SHORT_MODES)
        assert "00:03" in text
        assert f"{RUNNING_MARKER} Pomodoro" in text
        assert "Running" in text

    def test_paused(self) -> None:
        state = advance(initial_state(), Event.TOGGLE_RUN, Event.TICK, Event.TOGGLE_RUN)
        text = render_text(state, SHORT_MODES)
        assert "Paused" in text
        assert "00:04" in text
        # The marker only shows while counting.
        assert RUNNING_MARKER not in text

    def test_other_tab_shows_full_duration(self) -> None:
        state = advance(initial_state(), Event.TOGGLE_RUN, Event.TICK, Event.NAVIGATE_NEXT)
        text = render_text(state, SHORT_MODES)
        assert "02:00" in text
        assert "00:04" not in text
        assert f"{RUNNING_MARKER} Pomodoro" in text
        assert "Pomodoro is running" in text

    def test_full_bar_remaining_zero(self) -> None:
        state = advance(initial_state(), Event.TOGGLE_RUN, *[Event.TICK] * 5)
        assert render_text(state, SHORT_MODES).count("00:00") == 1

    def test_does_not_mutate(self) -> None:
        state = advance(initial_state(), Event.TOGGLE_RUN, Event.TICK)
        snapshot = state.model_dump()
        render_text(state, SHORT_MODES)
        assert state.model_dump() == snapshot
        assert state.status == RunStatus.RUNNING

    def test_key_hints(self) -> None:
        assert "space" in render_text(initial_state(), SHORT_MODES)
