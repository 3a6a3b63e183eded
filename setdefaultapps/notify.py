# -*- coding: utf-8 -*-
"""
Notification wrapper.

We use plyer to post a desktop notification summarizing what was applied.
The run itself is root under Jamf, outside any GUI session, so the
notification is posted by re-running this module as the console user:

    python -m setdefaultapps.notify --title T --message M

If plyer fails (no backend for the session), the run still succeeds.
"""

from __future__ import annotations

import argparse
import logging
import subprocess
import sys
from typing import List, Optional, Sequence

from .commands import Runner, run_command
from .system import ConsoleUser

logger = logging.getLogger(__name__)

NOTIFY_TIMEOUT_SEC = 30.0


def notify(title: str, message: str, timeout: int = 5, app_name: Optional[str] = None) -> bool:
    try:
        from plyer import notification  # type: ignore

        notification.notify(
            title=title,
            message=message,
            app_name=app_name or title,
            timeout=timeout,
        )
        return True
    except Exception as e:  # plyer raises backend-specific errors
        logger.debug("Notification failed: %s", e)
        return False


def notify_command(title: str, message: str, timeout: int = 5, app_name: Optional[str] = None) -> List[str]:
    argv = [sys.executable, "-m", "setdefaultapps.notify", "--title", title, "--message", message,
            "--timeout", str(timeout)]
    if app_name:
        argv += ["--app-name", app_name]
    return argv


def notify_as_user(
    user: ConsoleUser,
    title: str,
    message: str,
    timeout: int = 5,
    app_name: Optional[str] = None,
    runner: Runner = run_command,
) -> bool:
    """Post the notification inside `user`'s GUI session."""
    argv = user.as_user_prefix() + notify_command(title, message, timeout, app_name)
    try:
        res = runner(argv, NOTIFY_TIMEOUT_SEC)
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.warning("WARNING: Could not post notification: %s", e)
        return False
    if not res.ok:
        logger.warning("WARNING: Notification helper exited with %s", res.returncode)
    return res.ok


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="setdefaultapps.notify")
    parser.add_argument("--title", required=True)
    parser.add_argument("--message", required=True)
    parser.add_argument("--timeout", type=int, default=5)
    parser.add_argument("--app-name", default=None)
    args = parser.parse_args(argv)
    return 0 if notify(args.title, args.message, args.timeout, args.app_name) else 1


if __name__ == "__main__":
    sys.exit(main())
