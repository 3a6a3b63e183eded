# -*- coding: utf-8 -*-
"""
swiftDialog document building and invocation.

The document is the JSON accepted by `dialog --jsonfile`: a flat header
plus a `selectitems` list with one dropdown per item, in selection order.
"""

from __future__ import annotations

import json
import logging
import os
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .commands import Runner, run_command
from .errors import ConfigError, RendererError
from .i18n import LANG_EN, t
from .query import DialogField

logger = logging.getLogger(__name__)

DIALOG_BINARY = "/usr/local/bin/dialog"
DIALOG_TIMEOUT_SEC = 900.0
TEMP_DIR = "/var/tmp"
TEMP_PREFIX = "SetDefaultApps."

SD_ICON = "/System/Applications/App Store.app"
ICON_FILES = "/System/Library/CoreServices/CoreTypes.bundle/Contents/Resources/"
OVERLAY_ICON = ICON_FILES + "ToolbarCustomizeIcon.icns"
TITLE_FONT = "name=Avenir Next,shadow=1"
WINDOW_WIDTH = 920
WINDOW_HEIGHT = 520


@dataclass(frozen=True)
class DialogContext:
    support_url: str
    banner_image: str
    user_name: str = ""
    user_uid: str = ""
    dialog_version: str = ""
    banner_padding: int = 5
    preset: Optional[str] = None
    language: str = LANG_EN
    hour: int = 12


@dataclass
class RenderResult:
    returncode: int
    stdout: str = ""


def greeting_key(hour: int) -> str:
    if hour < 12:
        return "greeting_morning"
    if hour <= 18:
        return "greeting_afternoon"
    return "greeting_evening"


def build_header(context: DialogContext) -> Dict[str, Any]:
    lang = context.language
    preset_note = t(lang, f"preset_{context.preset}") if context.preset else ""
    message = t(lang, "dialog_message", greeting=t(lang, greeting_key(context.hour)), preset_note=preset_note)
    help_message = t(
        lang,
        "help_message",
        user=context.user_name,
        uid=context.user_uid,
        version=context.dialog_version,
    )
    # Leading spaces keep the title clear of the overlay icon on the banner.
    title = " " * max(0, int(context.banner_padding)) + t(lang, "dialog_title")
    return {
        "icon": SD_ICON,
        "message": message,
        "bannerimage": context.banner_image,
        "infobox": t(lang, "infobox"),
        "overlayicon": OVERLAY_ICON,
        "ontop": "true",
        "bannertitle": title,
        "titlefont": TITLE_FONT,
        "helpmessage": help_message,
        "helpimage": f"qr={context.support_url}",
        "infobutton": t(lang, "btn_more_info"),
        "infobuttonaction": context.support_url,
        "width": WINDOW_WIDTH,
        "height": WINDOW_HEIGHT,
        "button1text": t(lang, "btn_ok"),
        "button2text": t(lang, "btn_cancel"),
        "moveable": "true",
        "json": "true",
        "quitkey": "0",
        "messageposition": "top",
    }


def build_select_item(field: DialogField) -> Dict[str, Any]:
    entry: Dict[str, Any] = {"title": field.label, "values": list(field.candidates)}
    if field.current_default:
        entry["default"] = field.current_default
    return entry


def build_document(fields: Sequence[DialogField], context: DialogContext) -> Dict[str, Any]:
    """Header plus one dropdown per field, in the order given."""
    labels: Dict[str, str] = {}
    for field in fields:
        token = labels.get(field.label)
        if token is not None:
            raise ConfigError(f"Duplicate dialog label '{field.label}' ({token}, {field.item.token})")
        labels[field.label] = field.item.token

    document = build_header(context)
    document["selectitems"] = [build_select_item(field) for field in fields]
    return document


def write_document(document: Dict[str, Any], directory: str = TEMP_DIR) -> Path:
    """
    Write the document to a fresh temp file readable by the console user.

    The caller owns the file and removes it when the run ends.
    """
    fd, name = tempfile.mkstemp(prefix=TEMP_PREFIX, dir=directory)
    path = Path(name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump(document, fh, ensure_ascii=False, indent=2)
        os.chmod(path, 0o644)
    except Exception:
        remove_document(path)
        raise
    return path


def remove_document(path: Optional[Path]) -> None:
    if path is None:
        return
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("WARNING: Could not remove %s: %s", path, e)


def run_dialog(
    json_path: Path,
    binary: str = DIALOG_BINARY,
    runner: Runner = run_command,
    timeout: float = DIALOG_TIMEOUT_SEC,
) -> RenderResult:
    argv: List[str] = [binary, "--json", "--jsonfile", str(json_path)]
    try:
        res = runner(argv, timeout)
    except subprocess.TimeoutExpired as e:
        raise RendererError(f"swiftDialog did not finish within {timeout:g}s") from e
    except OSError as e:
        raise RendererError(f"Could not start swiftDialog at {binary}: {e}") from e
    return RenderResult(returncode=res.returncode, stdout=res.stdout)
