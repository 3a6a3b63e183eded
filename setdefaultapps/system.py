# -*- coding: utf-8 -*-
"""
Read-only facts about the Mac: who is at the console, OS name/version.

The script runs as root from Jamf, but default handlers are per-user, so
utiluti has to be run in the console user's context.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import List, Optional

from .commands import Runner, run_command

logger = logging.getLogger(__name__)

FACT_TIMEOUT_SEC = 10.0


@dataclass(frozen=True)
class ConsoleUser:
    name: str
    uid: str

    def as_user_prefix(self) -> List[str]:
        """argv prefix that runs a command as this user in their GUI session."""
        return ["launchctl", "asuser", self.uid, "sudo", "-u", self.name]


@dataclass(frozen=True)
class SystemFacts:
    user: ConsoleUser
    macos_name: str = ""
    macos_version: str = ""


def _read(runner: Runner, argv: List[str], input_text: Optional[str] = None) -> str:
    try:
        res = runner(argv, FACT_TIMEOUT_SEC, input_text=input_text)
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug("Fact query %s failed: %s", argv[0], e)
        return ""
    if not res.ok:
        return ""
    return res.stdout.strip()


def parse_console_user(scutil_output: str) -> str:
    """
    Pick the user name from `scutil` "show State:/Users/ConsoleUser" output.

    Returns "" at the login window.
    """
    for line in (scutil_output or "").splitlines():
        parts = line.split()
        if len(parts) >= 3 and parts[0] == "Name" and parts[1] == ":":
            name = parts[2]
            if name == "loginwindow":
                return ""
            return name
    return ""


def get_console_user(runner: Runner = run_command) -> Optional[ConsoleUser]:
    out = _read(runner, ["scutil"], input_text="show State:/Users/ConsoleUser\n")
    name = parse_console_user(out)
    if not name:
        return None
    uid = _read(runner, ["id", "-u", name])
    if not uid:
        return None
    return ConsoleUser(name=name, uid=uid)


def gather_facts(user: ConsoleUser, runner: Runner = run_command) -> SystemFacts:
    return SystemFacts(
        user=user,
        macos_name=_read(runner, ["/usr/bin/sw_vers", "-productName"]),
        macos_version=_read(runner, ["/usr/bin/sw_vers", "-productVersion"]),
    )
