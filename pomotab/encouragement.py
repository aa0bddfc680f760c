"""Short messages used as the body of completion notifications."""

from __future__ import annotations

import random

from pomotab.models import TimerMode

_WORK_DONE_MESSAGES: list[str] = [
    "Nice work. Time for a break.",
    "Interval finished. Step away from the screen for a moment.",
    "Done! Stretch your shoulders and neck.",
    "That one is in the bag. Get some water if you can.",
    "Focus block complete. Look at something far away for twenty seconds.",
]

_BREAK_OVER_MESSAGES: list[str] = [
    "Break is over. Ready when you are.",
    "Back to it, one small step at a time.",
    "Rested? Pick up where you left off.",
    "Time to start the next interval.",
]


def get_work_done_message() -> str:
    """Return a random message for the end of a work interval."""
    return random.choice(_WORK_DONE_MESSAGES)


def get_break_over_message() -> str:
    """Return a random message for the end of a break."""
    return random.choice(_BREAK_OVER_MESSAGES)


def completion_message(mode: TimerMode) -> str:
    if mode == TimerMode.WORK:
        return get_work_done_message()
    return get_break_over_message()
