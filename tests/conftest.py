from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

import pytest

from setdefaultapps.commands import CommandResult
from setdefaultapps.system import ConsoleUser
from setdefaultapps.utiluti import UTILUTI_BINARY, Utiluti

U = UTILUTI_BINARY


class FakeRunner:
    """
    Stand-in for run_command.

    Responses are keyed by argv tuples (without the launchctl/sudo prefix);
    the longest key that prefixes the call wins. A response can be a str
    (stdout, exit 0), a CommandResult, an exception to raise, or a callable
    taking the argv list. Unknown commands succeed with empty output.
    """

    def __init__(self, responses: Optional[Dict[Tuple[str, ...], object]] = None):
        self.responses = dict(responses or {})
        self.calls: List[Tuple[str, ...]] = []
        self.raw_calls: List[Tuple[str, ...]] = []
        self.inputs: List[Optional[str]] = []

    def __call__(self, argv: Sequence[str], timeout: float, input_text: Optional[str] = None) -> CommandResult:
        raw = tuple(argv)
        self.raw_calls.append(raw)
        self.inputs.append(input_text)
        if raw[:2] == ("launchctl", "asuser"):
            raw = raw[6:]
        self.calls.append(raw)

        best = None
        for key in self.responses:
            if raw[: len(key)] == key and (best is None or len(key) > len(best)):
                best = key
        if best is None:
            return CommandResult(0, "")
        resp = self.responses[best]
        if isinstance(resp, BaseException):
            raise resp
        if callable(resp):
            resp = resp(list(raw))
        if isinstance(resp, str):
            return CommandResult(0, resp)
        return resp

    def called(self, *prefix: str) -> bool:
        return any(c[: len(prefix)] == prefix for c in self.calls)


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def console_user() -> ConsoleUser:
    return ConsoleUser(name="jdoe", uid="501")


@pytest.fixture
def make_utility(console_user):
    def _make(responses=None) -> Tuple[Utiluti, FakeRunner]:
        fake = FakeRunner(responses)
        return Utiluti(user=console_user, runner=fake), fake

    return _make
