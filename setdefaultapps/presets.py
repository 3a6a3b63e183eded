# -*- coding: utf-8 -*-
"""
Turn the Jamf selection parameter into an ordered list of items.

The parameter is either a preset name or a comma-separated token list,
e.g. "https,mailto,pdf,docx".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from .errors import ConfigError
from .items import Item, get_item, normalize_token, validate_labels

logger = logging.getLogger(__name__)

DEFAULT_SELECTION = "docs-only"

PRESETS: Dict[str, Tuple[str, ...]] = {
    "browser-only": ("https",),
    "email-only": ("mailto",),
    "docs-only": ("pdf", "docx", "xlsx", "txt"),
}


@dataclass(frozen=True)
class Selection:
    items: Tuple[Item, ...]
    preset: Optional[str] = None

    @property
    def tokens(self) -> List[str]:
        return [item.token for item in self.items]


def _clean(raw: str) -> str:
    return "".join((raw or "").split()).lower()


def resolve_selection(raw: str) -> Selection:
    """
    Resolve a preset name or comma list. Unknown and repeated tokens are
    dropped (unknown ones with a warning); an empty result is fatal.
    """
    cleaned = _clean(raw)
    if not cleaned:
        raise ConfigError("No UTI list or preset provided")

    preset = cleaned if cleaned in PRESETS else None
    tokens = PRESETS[preset] if preset else tuple(cleaned.split(","))

    seen: Set[str] = set()
    items: List[Item] = []
    for token in tokens:
        token = normalize_token(token)
        if not token or token in seen:
            continue
        item = get_item(token)
        if item is None:
            logger.warning("WARNING: Ignoring unknown item '%s'", token)
            continue
        seen.add(token)
        items.append(item)

    if not items:
        raise ConfigError(f"Selection '{raw}' did not resolve to any known item")

    return Selection(items=tuple(validate_labels(items)), preset=preset)
