# -*- coding: utf-8 -*-
"""
Make sure swiftDialog and utiluti are present before anything is shown.

Installation is delegated to Jamf policies triggered by name; this module
only decides when to fire a trigger and whether the result is usable.
"""

from __future__ import annotations

import logging
import os
import re
import subprocess
from typing import Callable, Tuple

from .commands import Runner, run_command
from .errors import DependencyError

logger = logging.getLogger(__name__)

JAMF_BINARY = "/usr/local/bin/jamf"
MIN_DIALOG_VERSION = "2.5.0"
POLICY_TIMEOUT_SEC = 600.0
VERSION_TIMEOUT_SEC = 15.0


def version_tuple(version: str) -> Tuple[int, ...]:
    return tuple(int(x) for x in re.findall(r"\d+", version or ""))


def is_at_least(minimum: str, actual: str) -> bool:
    have = version_tuple(actual)
    if not have:
        return False
    want = version_tuple(minimum)
    width = max(len(have), len(want))
    return have + (0,) * (width - len(have)) >= want + (0,) * (width - len(want))


def _is_executable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


class DependencyChecker:
    def __init__(
        self,
        runner: Runner = run_command,
        is_executable: Callable[[str], bool] = _is_executable,
        jamf_binary: str = JAMF_BINARY,
    ):
        self.runner = runner
        self.is_executable = is_executable
        self.jamf_binary = jamf_binary

    def trigger_policy(self, trigger: str) -> bool:
        if not trigger:
            return False
        logger.info("Running Jamf policy trigger '%s'", trigger)
        try:
            res = self.runner([self.jamf_binary, "policy", "-trigger", trigger], POLICY_TIMEOUT_SEC)
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.error("ERROR: Jamf policy '%s' failed: %s", trigger, e)
            return False
        if not res.ok:
            logger.error("ERROR: Jamf policy '%s' exited with %s", trigger, res.returncode)
        return res.ok

    def dialog_version(self, binary: str) -> str:
        if not self.is_executable(binary):
            return ""
        try:
            res = self.runner([binary, "--version"], VERSION_TIMEOUT_SEC)
        except (OSError, subprocess.TimeoutExpired):
            return ""
        return res.stdout.strip() if res.ok else ""

    def ensure_dialog(self, binary: str, trigger: str, minimum: str = MIN_DIALOG_VERSION) -> str:
        """
        Return the installed swiftDialog version, installing or updating
        through `trigger` when it is missing or older than `minimum`.
        """
        logger.info("Ensuring that swiftDialog version is installed...")
        version = self.dialog_version(binary)
        if not version:
            logger.info("Swift Dialog is missing or corrupted - Installing from JAMF")
            self.trigger_policy(trigger)
            version = self.dialog_version(binary)
        elif not is_at_least(minimum, version):
            logger.info("Swift Dialog is outdated - Installing version '%s' from JAMF...", minimum)
            self.trigger_policy(trigger)
            version = self.dialog_version(binary) or version

        if not version:
            raise DependencyError(binary, f"install trigger '{trigger}' did not provide it")
        if not is_at_least(minimum, version):
            # An older dialog still renders the window; carry on.
            logger.warning("WARNING: Swift Dialog %s is older than %s", version, minimum)
        else:
            logger.info("Swift Dialog is currently running: %s", version)
        return version

    def ensure_utiluti(self, binary: str, trigger: str) -> None:
        if self.is_executable(binary):
            return
        logger.info("utiluti is missing - Installing from JAMF")
        self.trigger_policy(trigger)
        if not self.is_executable(binary):
            raise DependencyError(binary, f"install trigger '{trigger}' did not provide it")
