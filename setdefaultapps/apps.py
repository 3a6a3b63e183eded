# -*- coding: utf-8 -*-
"""
Application path helpers.

utiluti reports handlers as absolute bundle paths. The dialog shows names
relative to the recognized application folders, and the applier maps a
chosen name back to a path.
"""

from __future__ import annotations

import os
from typing import Callable, Iterable, List, Optional, Sequence

# Prefixes stripped from utiluti output to get display names.
APP_DIRS: Sequence[str] = (
    "/Applications/",
    "/System/Applications/",
    "/System/Volumes/Preboot/Cryptexes/App/System/Applications/",
    "/System/Library/CoreServices/",
)

# Lookup order when turning a chosen name back into a bundle path.
SEARCH_DIRS: Sequence[str] = (
    "/Applications",
    "/System/Applications",
    "/System/Library/CoreServices",
)

_EMPTY_CHOICES = ("", "null")


def display_name_for_path(path: str, base_dirs: Sequence[str] = APP_DIRS) -> Optional[str]:
    """
    Strip the recognized folder prefix from `path`.

    Returns None for paths outside every base dir (user folders, volumes,
    build products); those handlers cannot be re-resolved when applying.
    """
    p = (path or "").strip().rstrip("/")
    if not p:
        return None
    for base in base_dirs:
        prefix = base if base.endswith("/") else base + "/"
        if p.startswith(prefix):
            name = p[len(prefix):]
            return name or None
    return None


def display_names(paths: Iterable[str], base_dirs: Sequence[str] = APP_DIRS) -> List[str]:
    out: List[str] = []
    for path in paths:
        name = display_name_for_path(path, base_dirs)
        if name:
            out.append(name)
    return out


def clean_app_name(raw: Optional[str]) -> str:
    return (raw or "").replace('"', "").strip()


def is_empty_choice(raw: Optional[str]) -> bool:
    return clean_app_name(raw).lower() in _EMPTY_CHOICES


def locate_app(
    app_name: str,
    search_dirs: Sequence[str] = SEARCH_DIRS,
    exists: Callable[[str], bool] = os.path.exists,
) -> str:
    """
    Return the first existing `<dir>/<app_name>` in priority order.

    Falls back to the last directory (CoreServices) so the bundle id lookup
    still gets a concrete path and reports the failure itself.
    """
    name = clean_app_name(app_name)
    for base in search_dirs:
        candidate = os.path.join(base, name)
        if exists(candidate):
            return candidate
    return os.path.join(search_dirs[-1], name)
