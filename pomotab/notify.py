"""Best-effort desktop notifications (notify-send / osascript)."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
import threading
from pathlib import Path
from typing import Optional

log = logging.getLogger(__name__)

ICON_PATH = Path(__file__).resolve().parent / "assets" / "pomodoro.svg"

_TIMEOUT_SECONDS = 5


def _applescript_quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _build_command(title: str, body: str, icon: Path) -> Optional[list[str]]:
    """Return the notification command for this platform, or None if there is none."""
    if sys.platform == "darwin":
        osascript = shutil.which("osascript")
        if osascript is None:
            return None
        script = f"display notification {_applescript_quote(body)} with title {_applescript_quote(title)}"
        return [osascript, "-e", script]

    notify_send = shutil.which("notify-send")
    if notify_send is None:
        return None
    cmd = [notify_send, "--app-name=pomotab"]
    if icon.exists():
        cmd.append(f"--icon={icon}")
    cmd.extend([title, body])
    return cmd


def send_notification(title: str, body: str, icon: Path = ICON_PATH) -> bool:
    """Send a notification and wait for it. Returns True if it was delivered.

    Never raises: a missing backend or a failing command is only logged.
    """
    cmd = _build_command(title, body, icon)
    if cmd is None:
        log.info("No notification backend available; skipping %r", title)
        return False

    try:
        subprocess.run(
            cmd,
            check=True,
            timeout=_TIMEOUT_SECONDS,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except (subprocess.SubprocessError, OSError) as exc:
        log.warning("Notification %r failed: %s", title, exc)
        return False
    log.debug("Notification sent: %r", title)
    return True


def notify(title: str, body: str, icon: Path = ICON_PATH) -> None:
    """Send a notification in the background. Fire-and-forget."""
    thread = threading.Thread(
        target=send_notification,
        args=(title, body, icon),
        name="pomotab-notify",
        daemon=True,
    )
    try:
        thread.start()
    except RuntimeError as exc:
        log.warning("Could not dispatch notification %r: %s", title, exc)
