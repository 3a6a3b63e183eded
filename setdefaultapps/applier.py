# -*- coding: utf-8 -*-
"""
Apply the chosen handlers through utiluti, one item at a time.

A problem with one item is recorded in its ApplyResult and never stops the
items after it.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Sequence

from .apps import SEARCH_DIRS, clean_app_name, is_empty_choice, locate_app
from .items import Item
from .utiluti import Utiluti

logger = logging.getLogger(__name__)


class ApplyStatus(Enum):
    SKIPPED = "skipped"
    APPLIED = "applied"
    FAILED = "failed"


@dataclass(frozen=True)
class ApplyResult:
    token: str
    status: ApplyStatus
    app_name: str = ""
    bundle_id: str = ""
    reason: str = ""


def apply_default(
    utility: Utiluti,
    item: Item,
    app_name: str,
    search_dirs: Sequence[str] = SEARCH_DIRS,
    exists: Callable[[str], bool] = os.path.exists,
) -> ApplyResult:
    name = clean_app_name(app_name)
    if is_empty_choice(name):
        logger.info("Skipping %s (no app selected)", item.token)
        return ApplyResult(token=item.token, status=ApplyStatus.SKIPPED)

    def failed(reason: str, bundle_id: str = "") -> ApplyResult:
        logger.error("ERROR: %s", reason)
        return ApplyResult(item.token, ApplyStatus.FAILED, app_name=name, bundle_id=bundle_id, reason=reason)

    app_path = locate_app(name, search_dirs, exists)
    bundle = utility.app_id(app_path)
    if not bundle.is_found or bundle.value.strip().lower() == "null":
        return failed(f"Could not determine bundleId for '{name}' ({app_path}): {bundle.describe()}")
    bundle_id = bundle.value.strip()

    if item.is_url_scheme:
        res = utility.set_url_handler(item.token, bundle_id)
    else:
        uti = utility.get_uti(item.token)
        if not uti.is_found:
            return failed(f"Could not determine UTI for '{item.token}': {uti.describe()}", bundle_id)
        res = utility.set_type_handler(uti.value.strip(), bundle_id)

    if res.is_error:
        return failed(f"Setting {bundle_id} for {item.token} failed: {res.reason}", bundle_id)

    logger.info("Results: %s", res.value or f"{bundle_id} set for {item.token}")
    return ApplyResult(item.token, ApplyStatus.APPLIED, app_name=name, bundle_id=bundle_id)


def apply_all(
    utility: Utiluti,
    items: Sequence[Item],
    choices: Dict[str, str],
    search_dirs: Sequence[str] = SEARCH_DIRS,
    exists: Callable[[str], bool] = os.path.exists,
) -> List[ApplyResult]:
    """Apply every item's choice in selection order. Missing choices are skipped."""
    return [
        apply_default(utility, item, choices.get(item.token, ""), search_dirs, exists)
        for item in items
    ]
