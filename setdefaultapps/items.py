# -*- coding: utf-8 -*-
"""
Static registry of the URL schemes and file types that can be offered.

Each token maps to the label shown above its dropdown and to the kind of
lookup utiluti needs for it. Labels are also the keys swiftDialog uses in
its JSON output, so they must stay unique.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional

from .errors import ConfigError


class ItemKind(Enum):
    URL_SCHEME = "url_scheme"
    FILE_TYPE = "file_type"


@dataclass(frozen=True)
class Item:
    token: str
    display_label: str
    kind: ItemKind

    @property
    def is_url_scheme(self) -> bool:
        return self.kind is ItemKind.URL_SCHEME


def _url(token: str, label: str) -> Item:
    return Item(token=token, display_label=f"{label} ({token})", kind=ItemKind.URL_SCHEME)


def _file(token: str, label: str) -> Item:
    return Item(token=token, display_label=f"{label} ({token})", kind=ItemKind.FILE_TYPE)


REGISTRY: Dict[str, Item] = {
    item.token: item
    for item in (
        _url("mailto", "Email App"),
        _url("https", "Web Browser"),
        _url("http", "Web Browser"),
        _url("ftp", "File Transfer"),
        _url("ssh", "Remote Shell"),
        _file("xlsx", "Spreadsheet"),
        _file("docx", "Documents"),
        _file("txt", "Text Files"),
        _file("md", "Markdown"),
        _file("pdf", "Portable Doc Format"),
    )
}


def normalize_token(token: str) -> str:
    token = (token or "").strip().lower()
    # Accept ".pdf" as well as "pdf".
    return token.lstrip(".")


def is_known_token(token: str) -> bool:
    return normalize_token(token) in REGISTRY


def get_item(token: str) -> Optional[Item]:
    return REGISTRY.get(normalize_token(token))


def validate_labels(items: Iterable[Item]) -> List[Item]:
    """
    Return `items` as a list, raising ConfigError if two share a label.

    The dialog build and the result lookup both key on the label, so a
    collision would make one field's answer unreachable.
    """
    seen: Dict[str, str] = {}
    out: List[Item] = []
    for item in items:
        other = seen.get(item.display_label)
        if other is not None and other != item.token:
            raise ConfigError(
                f"Items '{other}' and '{item.token}' share the label '{item.display_label}'"
            )
        seen[item.display_label] = item.token
        out.append(item)
    return out
