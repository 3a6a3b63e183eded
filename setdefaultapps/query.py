# -*- coding: utf-8 -*-
"""
Collect the dropdown data for each item: installed candidates and the
current default, both as display names.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .apps import APP_DIRS, display_name_for_path, display_names
from .items import Item
from .utiluti import QueryResult, Utiluti

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DialogField:
    item: Item
    candidates: Tuple[str, ...] = ()
    current_default: Optional[str] = None

    @property
    def label(self) -> str:
        return self.item.display_label


def _default_name(result: QueryResult, base_dirs: Sequence[str]) -> Optional[str]:
    for line in result.lines():
        name = display_name_for_path(line, base_dirs)
        if name:
            return name
    return None


def query_field(utility: Utiluti, item: Item, base_dirs: Sequence[str] = APP_DIRS) -> DialogField:
    """
    Ask utiluti for the candidates and current default of one item.

    URL schemes use the scheme listing first. File types, and schemes whose
    listing or default came back blank, go through get-uti and the type
    listing. Nothing here raises; failures give an empty field.
    """
    listing = QueryResult.not_found()
    default = QueryResult.not_found()

    if item.is_url_scheme:
        listing = utility.list_url_candidates(item.token)
        default = utility.get_url_default(item.token)
        for what, res in (("url list", listing), ("url", default)):
            if res.is_error:
                logger.warning("WARNING: utiluti %s %s failed: %s", what, item.token, res.reason)

    need_listing = not listing.is_found and not listing.is_error
    need_default = not default.is_found and not default.is_error
    if need_listing or need_default:
        uti = utility.get_uti(item.token)
        if uti.is_found:
            if need_listing:
                listing = utility.list_type_candidates(uti.value)
            if need_default:
                default = utility.get_type_default(uti.value)
        elif not item.is_url_scheme:
            logger.warning("WARNING: get-uti returned %s for '%s'", uti.describe(), item.token)

    candidates: List[str] = display_names(listing.lines(), base_dirs)
    current = _default_name(default, base_dirs)
    # The pre-selected value has to be one of the dropdown values.
    if current and current not in candidates:
        candidates.insert(0, current)

    if current:
        logger.info("Current default for %s: %s", item.token, current)
    else:
        logger.info("No current default found for %s", item.token)
    return DialogField(item=item, candidates=tuple(candidates), current_default=current)


def query_fields(utility: Utiluti, items: Sequence[Item], base_dirs: Sequence[str] = APP_DIRS) -> List[DialogField]:
    return [query_field(utility, item, base_dirs) for item in items]
