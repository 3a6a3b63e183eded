# -*- coding: utf-8 -*-
"""
Run configuration.

Two sources:
- Jamf script parameters ($4..$9), parsed by `parse_args`.
- The managed preferences plist pushed by a configuration profile, for
  branding (banner image, padding, support files directory).

Fields:
- selection: str                 preset name or comma list
- dialog_binary: str
- dialog_install_trigger: str
- utiluti_install_trigger: str
- support_install_trigger: str
- support_url: str
- language: "en" | "zh"
- notifications_enabled: bool
- utiluti_timeout_sec / dialog_timeout_sec: float
"""

from __future__ import annotations

import argparse
import logging
import os
import plistlib
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence

from .dialog import DIALOG_BINARY, DIALOG_TIMEOUT_SEC
from .i18n import normalize_lang
from .presets import DEFAULT_SELECTION
from .utiluti import DEFAULT_TIMEOUT_SEC, UTILUTI_BINARY

logger = logging.getLogger(__name__)

SCRIPT_NAME = "SetDefaultApps"
LOG_FILE = Path("/Library/Logs") / f"{SCRIPT_NAME}.log"
MANAGED_PREFS_PATH = Path("/Library/Managed Preferences/defaults.plist")
FALLBACK_BANNER_IMAGE = "/Library/Desktop Pictures/Sky.jpg"
DEFAULT_BANNER_PADDING = 5
DEFAULT_SUPPORT_URL = "https://support.example.com"

ENV_LANG = "SETDEFAULTAPPS_LANG"
ENV_NOTIFY = "SETDEFAULTAPPS_NOTIFY"


def _to_bool(value, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        s = value.strip().lower()
        if s in ("1", "true", "yes", "on"):
            return True
        if s in ("0", "false", "no", "off"):
            return False
    return default


def _to_str(value, default: str) -> str:
    # Jamf passes unset parameters as empty strings.
    if value is None:
        return default
    s = str(value).strip()
    return s or default


def _to_timeout(value, default: float) -> float:
    try:
        out = float(value)
    except (TypeError, ValueError):
        return default
    if out <= 0:
        return default
    return out


@dataclass
class AppConfig:
    selection: str = DEFAULT_SELECTION
    dialog_binary: str = DIALOG_BINARY
    dialog_install_trigger: str = "installswiftDialog"
    utiluti_install_trigger: str = "install_utiluti"
    support_install_trigger: str = "install_support"
    support_url: str = DEFAULT_SUPPORT_URL
    utiluti_binary: str = UTILUTI_BINARY
    language: str = "en"
    notifications_enabled: bool = True
    utiluti_timeout_sec: float = DEFAULT_TIMEOUT_SEC
    dialog_timeout_sec: float = DIALOG_TIMEOUT_SEC
    log_file: Path = LOG_FILE

    @classmethod
    def from_dict(cls, data: Mapping) -> "AppConfig":
        d = cls()
        return cls(
            selection=_to_str(data.get("selection"), d.selection),
            dialog_binary=_to_str(data.get("dialog_binary"), d.dialog_binary),
            dialog_install_trigger=_to_str(data.get("dialog_install_trigger"), d.dialog_install_trigger),
            utiluti_install_trigger=_to_str(data.get("utiluti_install_trigger"), d.utiluti_install_trigger),
            support_install_trigger=_to_str(data.get("support_install_trigger"), d.support_install_trigger),
            support_url=_to_str(data.get("support_url"), d.support_url),
            utiluti_binary=_to_str(data.get("utiluti_binary"), d.utiluti_binary),
            language=normalize_lang(_to_str(data.get("language"), d.language)),
            notifications_enabled=_to_bool(data.get("notifications_enabled"), d.notifications_enabled),
            utiluti_timeout_sec=_to_timeout(data.get("utiluti_timeout_sec"), d.utiluti_timeout_sec),
            dialog_timeout_sec=_to_timeout(data.get("dialog_timeout_sec"), d.dialog_timeout_sec),
            log_file=Path(_to_str(data.get("log_file"), str(d.log_file))),
        )


@dataclass(frozen=True)
class Branding:
    banner_image: str = FALLBACK_BANNER_IMAGE
    banner_padding: int = DEFAULT_BANNER_PADDING
    support_dir: str = ""

    @classmethod
    def from_dict(cls, data: Mapping) -> "Branding":
        try:
            padding = int(data.get("BannerPadding", DEFAULT_BANNER_PADDING))
        except (TypeError, ValueError):
            padding = DEFAULT_BANNER_PADDING
        return cls(
            banner_image=_to_str(data.get("BannerImage"), FALLBACK_BANNER_IMAGE),
            banner_padding=max(0, padding),
            support_dir=_to_str(data.get("SupportFiles"), ""),
        )


class ManagedPreferences:
    def __init__(self, path: Path = MANAGED_PREFS_PATH):
        self.path = path

    def load(self) -> Branding:
        if not self.path.exists():
            return Branding()
        try:
            with self.path.open("rb") as fh:
                data = plistlib.load(fh)
        except (OSError, plistlib.InvalidFileException, ValueError) as e:
            logger.warning("WARNING: Could not read %s: %s", self.path, e)
            return Branding()
        if not isinstance(data, dict):
            return Branding()
        logger.info("Found Defaults Files.  Reading in Info")
        return Branding.from_dict(data)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=SCRIPT_NAME,
        description="Let the console user pick default apps for URL schemes and file types.",
    )
    # $1-$3 are always supplied by Jamf and unused here.
    parser.add_argument("mount_point", nargs="?", default="")
    parser.add_argument("computer_name", nargs="?", default="")
    parser.add_argument("user_name", nargs="?", default="")
    parser.add_argument("selection", nargs="?", default="", help="preset or comma list ($4)")
    parser.add_argument("dialog_binary", nargs="?", default="", help="swiftDialog path ($5)")
    parser.add_argument("dialog_install_trigger", nargs="?", default="", help="Jamf trigger ($6)")
    parser.add_argument("utiluti_install_trigger", nargs="?", default="", help="Jamf trigger ($7)")
    parser.add_argument("support_install_trigger", nargs="?", default="", help="Jamf trigger ($8)")
    parser.add_argument("support_url", nargs="?", default="", help="support URL ($9)")
    # Jamf may also pass $10 and $11.
    parser.add_argument("extra", nargs="*", default=[])
    return parser


def parse_args(argv: Optional[Sequence[str]] = None, environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    ns = build_parser().parse_args(argv)
    env = os.environ if environ is None else environ
    data = dict(vars(ns))
    data["language"] = env.get(ENV_LANG, "")
    data["notifications_enabled"] = env.get(ENV_NOTIFY)
    return AppConfig.from_dict(data)
