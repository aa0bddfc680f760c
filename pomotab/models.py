"""Pydantic models -- single source of truth for all data types."""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class TimerMode(int, enum.Enum):
    """The three interval types, in tab order."""

    WORK = 0
    SHORT_BREAK = 1
    LONG_BREAK = 2

    @classmethod
    def at(cls, index: int) -> TimerMode:
        """Return the mode at ``index``. Out-of-range indices are a bug."""
        if not 0 <= index < len(cls):
            raise IndexError(f"mode index {index} out of range")
        return cls(index)

    @property
    def is_first(self) -> bool:
        return self.value == 0

    @property
    def is_last(self) -> bool:
        return self.value == len(TimerMode) - 1


class RunStatus(str, enum.Enum):
    """Whether elapsed time advances on a tick."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


class Event(str, enum.Enum):
    """Inputs accepted by the state machine."""

    NAVIGATE_NEXT = "navigate_next"
    NAVIGATE_PREV = "navigate_prev"
    TOGGLE_RUN = "toggle_run"
    RESET = "reset"
    TICK = "tick"
    COMPLETION_ACKNOWLEDGED = "completion_acknowledged"


class Effect(str, enum.Enum):
    """Follow-up work requested by a transition."""

    SCHEDULE_TICK = "schedule_tick"
    FIRE_COMPLETION = "fire_completion"
    NONE = "none"


class ModeSpec(BaseModel):
    """Static description of one mode: tab label, target and notification title."""

    model_config = ConfigDict(frozen=True)

    label: str
    seconds: int = Field(gt=0)
    done_title: str


class TimerState(BaseModel):
    """Snapshot of the timer. Immutable; transitions return a new one."""

    model_config = ConfigDict(frozen=True)

    viewed_mode: TimerMode = TimerMode.WORK
    active_mode: Optional[TimerMode] = None
    status: RunStatus = RunStatus.IDLE
    elapsed: int = Field(default=0, ge=0)
    fraction: float = Field(default=0.0, ge=0.0, le=1.0)

    @property
    def is_idle(self) -> bool:
        return self.status == RunStatus.IDLE

    @property
    def viewing_active(self) -> bool:
        """True when the displayed tab is the one counting."""
        return not self.is_idle and self.active_mode == self.viewed_mode


class AppConfig(BaseModel):
    """Application settings (read from ~/.config/pomotab/config.json)."""

    notifications: bool = True
    bell: bool = True
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level
