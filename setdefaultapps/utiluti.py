# -*- coding: utf-8 -*-
"""
utiluti wrapper.

utiluti (https://github.com/scriptingosx/utiluti) is the only source of
truth for installed handlers and current defaults. Every call returns a
QueryResult so "printed nothing" and "failed to run" stay distinguishable.

Subcommands used:
  url list <scheme>        candidate apps for a URL scheme
  url <scheme>             current default for a URL scheme
  url set <scheme> <id>    bind a bundle id to a URL scheme
  get-uti <ext>            UTI for a file extension
  type list <uti>          candidate apps for a UTI
  type <uti>               current default for a UTI
  type set <uti> <id>      bind a bundle id to a UTI
  app id <path>            bundle id of an application
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from .commands import Runner, run_command
from .system import ConsoleUser

logger = logging.getLogger(__name__)

UTILUTI_BINARY = "/usr/local/bin/utiluti"
DEFAULT_TIMEOUT_SEC = 30.0

NO_DEFAULT_MARKER = "<no default app found>"
_BLANK_VALUES = ("", "null", NO_DEFAULT_MARKER)


class QueryStatus(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class QueryResult:
    status: QueryStatus
    value: str = ""
    reason: str = ""

    @classmethod
    def found(cls, value: str) -> "QueryResult":
        return cls(QueryStatus.FOUND, value=value)

    @classmethod
    def not_found(cls) -> "QueryResult":
        return cls(QueryStatus.NOT_FOUND)

    @classmethod
    def error(cls, reason: str) -> "QueryResult":
        return cls(QueryStatus.ERROR, reason=reason)

    @property
    def is_found(self) -> bool:
        return self.status is QueryStatus.FOUND

    @property
    def is_error(self) -> bool:
        return self.status is QueryStatus.ERROR

    def lines(self) -> List[str]:
        return [ln.strip() for ln in self.value.splitlines() if ln.strip()]

    def describe(self) -> str:
        if self.is_found:
            return self.value
        if self.is_error:
            return f"error: {self.reason}"
        return "blank"


class Utiluti:
    def __init__(
        self,
        binary: str = UTILUTI_BINARY,
        user: Optional[ConsoleUser] = None,
        runner: Runner = run_command,
        timeout: float = DEFAULT_TIMEOUT_SEC,
    ):
        self.binary = binary
        self.user = user
        self.runner = runner
        self.timeout = timeout

    def _argv(self, args: Sequence[str]) -> List[str]:
        argv = [self.binary, *args]
        if self.user is not None:
            return self.user.as_user_prefix() + argv
        return argv

    def _run(self, *args: str) -> QueryResult:
        argv = self._argv(args)
        try:
            res = self.runner(argv, self.timeout)
        except subprocess.TimeoutExpired:
            return QueryResult.error(f"utiluti {' '.join(args)} timed out after {self.timeout:g}s")
        except OSError as e:
            return QueryResult.error(f"could not run {self.binary}: {e}")

        if not res.ok:
            detail = (res.stderr or res.stdout).strip() or f"exit code {res.returncode}"
            return QueryResult.error(detail)

        out = res.stdout.strip()
        if out in _BLANK_VALUES:
            return QueryResult.not_found()
        return QueryResult.found(out)

    # --------- queries ---------
    def list_url_candidates(self, scheme: str) -> QueryResult:
        return self._run("url", "list", scheme)

    def get_url_default(self, scheme: str) -> QueryResult:
        return self._run("url", scheme)

    def get_uti(self, ext: str) -> QueryResult:
        return self._run("get-uti", ext)

    def list_type_candidates(self, uti: str) -> QueryResult:
        return self._run("type", "list", uti)

    def get_type_default(self, uti: str) -> QueryResult:
        return self._run("type", uti)

    def app_id(self, app_path: str) -> QueryResult:
        return self._run("app", "id", app_path)

    # --------- changes ---------
    def set_url_handler(self, scheme: str, bundle_id: str) -> QueryResult:
        return self._run("url", "set", scheme, bundle_id)

    def set_type_handler(self, uti: str, bundle_id: str) -> QueryResult:
        return self._run("type", "set", uti, bundle_id)
