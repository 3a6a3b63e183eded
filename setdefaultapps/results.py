# -*- coding: utf-8 -*-
"""
Read the user's choices back out of swiftDialog's `--json` output.

On submit swiftDialog prints one object per dropdown, keyed by its title:

    {"Web Browser (https)" : {"selectedValue" : "Safari.app", "selectedIndex" : 0}}
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence

from .apps import clean_app_name, is_empty_choice
from .dialog import RenderResult
from .items import Item

logger = logging.getLogger(__name__)

# 2 = button2 (Cancel), 10 = quit key.
CANCEL_EXIT_CODES = (2, 10)


@dataclass(frozen=True)
class DialogOutcome:
    cancelled: bool
    choices: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def cancel(cls) -> "DialogOutcome":
        return cls(cancelled=True)

    @classmethod
    def submitted(cls, choices: Dict[str, str]) -> "DialogOutcome":
        return cls(cancelled=False, choices=dict(choices))


def parse_output(stdout: str) -> Dict[str, Any]:
    text = (stdout or "").strip()
    if not text:
        return {}
    try:
        data = json.loads(text)
    except ValueError:
        # Tolerate stray lines swiftDialog sometimes prints around the JSON.
        start, end = text.find("{"), text.rfind("}")
        if start < 0 or end <= start:
            logger.warning("WARNING: swiftDialog output is not JSON")
            return {}
        try:
            data = json.loads(text[start:end + 1])
        except ValueError:
            logger.warning("WARNING: swiftDialog output is not JSON")
            return {}
    return data if isinstance(data, dict) else {}


def _selected_value(entry: Any) -> Optional[str]:
    if isinstance(entry, dict):
        entry = entry.get("selectedValue")
    if isinstance(entry, str):
        return entry
    return None


def extract_choices(data: Dict[str, Any], items: Sequence[Item]) -> Dict[str, str]:
    """
    Map each item's token to the chosen app name ("" when nothing usable).

    Only tokens of `items` appear in the result.
    """
    choices: Dict[str, str] = {}
    for item in items:
        value = _selected_value(data.get(item.display_label))
        # Older swiftDialog builds report a lone dropdown only at the top level.
        if value is None and len(items) == 1:
            value = _selected_value(data.get("SelectedOption"))
        choices[item.token] = "" if is_empty_choice(value) else clean_app_name(value)
    return choices


def extract_outcome(render: RenderResult, items: Sequence[Item]) -> DialogOutcome:
    if render.returncode in CANCEL_EXIT_CODES:
        return DialogOutcome.cancel()
    return DialogOutcome.submitted(extract_choices(parse_output(render.stdout), items))
