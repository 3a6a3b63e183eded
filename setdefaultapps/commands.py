# -*- coding: utf-8 -*-
"""
Thin subprocess wrapper shared by every external call.

Everything that talks to utiluti, swiftDialog, jamf or the OS goes through a
`Runner` so tests can swap in a fake.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import Callable, Optional, Sequence


@dataclass
class CommandResult:
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


Runner = Callable[..., CommandResult]


def run_command(argv: Sequence[str], timeout: float, input_text: Optional[str] = None) -> CommandResult:
    """
    Run `argv` and capture text output.

    Raises subprocess.TimeoutExpired on timeout and OSError when the binary
    cannot be started; callers decide whether that is fatal.
    """
    proc = subprocess.run(
        list(argv),
        input=input_text,
        capture_output=True,
        text=True,
        timeout=timeout,
        check=False,
    )
    return CommandResult(returncode=proc.returncode, stdout=proc.stdout or "", stderr=proc.stderr or "")
