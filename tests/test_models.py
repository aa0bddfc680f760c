"""Tests for Pydantic models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pomotab.models import (
    AppConfig,
    Effect,
    Event,
    ModeSpec,
    RunStatus,
    TimerMode,
    TimerState,
)


class TestTimerMode:
    def test_order(self) -> None:
        assert [m.value for m in TimerMode] == [0, 1, 2]

    def test_at(self) -> None:
        assert TimerMode.at(1) is TimerMode.SHORT_BREAK

    @pytest.mark.parametrize("index", [-1, 3])
    def test_at_out_of_range(self, index: int) -> None:
        with pytest.raises(IndexError):
            TimerMode.at(index)

    def test_ends(self) -> None:
        assert TimerMode.WORK.is_first
        assert TimerMode.LONG_BREAK.is_last
        assert not TimerMode.SHORT_BREAK.is_first
        assert not TimerMode.SHORT_BREAK.is_last


class TestEnums:
    def test_run_status_values(self) -> None:
        assert RunStatus.IDLE.value == "idle"
        assert RunStatus.RUNNING.value == "running"
        assert RunStatus.PAUSED.value == "paused"

    def test_event_count(self) -> None:
        assert len(Event) == 6

    def test_effect_values(self) -> None:
        assert {e.value for e in Effect} == {"schedule_tick", "fire_completion", "none"}


class TestModeSpec:
    def test_positive_duration(self) -> None:
        with pytest.raises(ValidationError):
            ModeSpec(label="Broken", seconds=0, done_title="x")

    def test_frozen(self) -> None:
        spec = ModeSpec(label="Pomodoro", seconds=60, done_title="done")
        with pytest.raises(ValidationError):
            spec.seconds = 5  # type: ignore[misc]


class TestTimerState:
    def test_defaults(self) -> None:
        state = TimerState()
        assert state.is_idle
        assert state.viewed_mode == TimerMode.WORK
        assert not state.viewing_active

    def test_frozen(self) -> None:
        state = TimerState()
        with pytest.raises(ValidationError):
            state.elapsed = 3  # type: ignore[misc]

    def test_fraction_bounds(self) -> None:
        with pytest.raises(ValidationError):
            TimerState(fraction=1.5)
        with pytest.raises(ValidationError):
            TimerState(elapsed=-1)

    def test_viewing_active(self) -> None:
        state = TimerState(active_mode=TimerMode.WORK, status=RunStatus.PAUSED)
        assert state.viewing_active
        other = state.model_copy(update={"viewed_mode": TimerMode.LONG_BREAK})
        assert not other.viewing_active


class TestAppConfig:
    def test_defaults(self) -> None:
        config = AppConfig()
        assert config.notifications
        assert config.bell
        assert config.log_level == "WARNING"
        assert config.log_file is None

    def test_log_level_normalised(self) -> None:
        assert AppConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ValidationError):
            AppConfig(log_level="chatty")
