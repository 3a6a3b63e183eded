# -*- coding: utf-8 -*-
"""Exceptions that abort a run before or instead of applying defaults."""

from __future__ import annotations


class SetDefaultAppsError(Exception):
    """Base class for fatal errors. Anything raised from here exits non-zero."""


class ConfigError(SetDefaultAppsError):
    """Raised when the selection spec or dialog definition is unusable."""


class DependencyError(SetDefaultAppsError):
    """Raised when a required binary is missing and could not be installed."""

    def __init__(self, binary: str, reason: str = "") -> None:
        self.binary = binary
        self.reason = reason
        message = f"Required binary not available: {binary}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class RendererError(SetDefaultAppsError):
    """Raised when swiftDialog could not be run or did not finish in time."""
