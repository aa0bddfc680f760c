"""Tests for completion messages."""

from __future__ import annotations

from pomotab.encouragement import (
    _BREAK_OVER_MESSAGES,
    _WORK_DONE_MESSAGES,
    completion_message,
)
from pomotab.models import TimerMode


class TestCompletionMessage:
    def test_work(self) -> None:
        assert completion_message(TimerMode.WORK) in _WORK_DONE_MESSAGES

    def test_breaks(self) -> None:
        assert completion_message(TimerMode.SHORT_BREAK) in _BREAK_OVER_MESSAGES
        assert completion_message(TimerMode.LONG_BREAK) in _BREAK_OVER_MESSAGES
