# -*- coding: utf-8 -*-
"""
Core application orchestration.

One run, strictly in order:
- resolve the selection parameter into items
- check swiftDialog / utiluti (Jamf triggers when missing)
- ask utiluti for candidates and current defaults
- show the swiftDialog window and read the choices back
- apply each non-empty choice, then post a summary notification

Exit code is 0 for completion, cancel and partial failure; 1 only for
errors that stop the run before anything is applied.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from .applier import ApplyResult, ApplyStatus, apply_all
from .commands import Runner, run_command
from .config import AppConfig, Branding, ManagedPreferences
from .deps import DependencyChecker
from .dialog import TEMP_DIR, DialogContext, build_document, remove_document, run_dialog, write_document
from .errors import ConfigError, SetDefaultAppsError
from .i18n import t as i18n_t
from .notify import notify_as_user
from .presets import Selection, resolve_selection
from .query import query_fields
from .results import DialogOutcome, extract_outcome
from .system import ConsoleUser, gather_facts, get_console_user
from .utiluti import Utiluti

logger = logging.getLogger(__name__)


class SetDefaultAppsApp:
    def __init__(
        self,
        config: AppConfig,
        runner: Runner = run_command,
        branding: Optional[Branding] = None,
        deps: Optional[DependencyChecker] = None,
        notifier: Optional[Callable[..., bool]] = None,
        exists: Callable[[str], bool] = os.path.exists,
        temp_dir: str = TEMP_DIR,
        now: Callable[[], datetime] = datetime.now,
    ):
        self.config = config
        self.runner = runner
        self.branding = branding if branding is not None else ManagedPreferences().load()
        self.deps = deps or DependencyChecker(runner)
        self.notifier = notifier
        self.exists = exists
        self.temp_dir = temp_dir
        self.now = now

        self.outcome: Optional[DialogOutcome] = None
        self.results: List[ApplyResult] = []

    def tr(self, key: str, **kwargs) -> str:
        return i18n_t(self.config.language, key, **kwargs)

    # --------- steps ---------
    def _check_dependencies(self) -> str:
        version = self.deps.ensure_dialog(self.config.dialog_binary, self.config.dialog_install_trigger)
        banner = self.branding.banner_image
        if banner.startswith("/") and not self.exists(banner) and self.config.support_install_trigger:
            logger.info("Banner image %s is missing - installing support files", banner)
            self.deps.trigger_policy(self.config.support_install_trigger)
        self.deps.ensure_utiluti(self.config.utiluti_binary, self.config.utiluti_install_trigger)
        return version

    def _context(self, selection: Selection, user: ConsoleUser, dialog_version: str) -> DialogContext:
        return DialogContext(
            support_url=self.config.support_url,
            banner_image=self.branding.banner_image,
            user_name=user.name,
            user_uid=user.uid,
            dialog_version=dialog_version,
            banner_padding=self.branding.banner_padding,
            preset=selection.preset,
            language=self.config.language,
            hour=self.now().hour,
        )

    def _report(self, results: List[ApplyResult], user: ConsoleUser) -> None:
        applied = sum(1 for r in results if r.status is ApplyStatus.APPLIED)
        failed = sum(1 for r in results if r.status is ApplyStatus.FAILED)
        skipped = len(results) - applied - failed
        logger.info("Applied: %d, failed: %d, skipped: %d", applied, failed, skipped)

        if not self.config.notifications_enabled or (applied == 0 and failed == 0):
            return
        if failed == 0:
            msg = self.tr("ntf_applied", n=applied)
        elif applied == 0:
            msg = self.tr("ntf_failed", failed=failed)
        else:
            msg = self.tr("ntf_partial", n=applied, failed=failed)
        title = self.tr("ntf_title")
        if self.notifier is not None:
            self.notifier(title=title, message=msg, timeout=5, app_name=self.tr("app_name"))
        else:
            notify_as_user(user, title, msg, timeout=5, app_name=self.tr("app_name"), runner=self.runner)

    # --------- main flow ---------
    def execute(self) -> None:
        """Run the pipeline. Fatal problems raise SetDefaultAppsError."""
        selection = resolve_selection(self.config.selection)
        logger.info("Items to offer: %s", ", ".join(selection.tokens))

        user = get_console_user(self.runner)
        if user is None:
            raise ConfigError("No console user is logged in")
        facts = gather_facts(user, self.runner)
        logger.info("Console user: %s (uid %s), %s %s", user.name, user.uid, facts.macos_name, facts.macos_version)

        dialog_version = self._check_dependencies()
        utility = Utiluti(self.config.utiluti_binary, user, self.runner, self.config.utiluti_timeout_sec)

        logger.info("Constructing application list(s)")
        fields = query_fields(utility, selection.items)

        logger.info("Constructing display options")
        document = build_document(fields, self._context(selection, user, dialog_version))

        json_path: Optional[Path] = None
        try:
            json_path = write_document(document, self.temp_dir)
            render = run_dialog(json_path, self.config.dialog_binary, self.runner, self.config.dialog_timeout_sec)
        finally:
            remove_document(json_path)

        self.outcome = extract_outcome(render, selection.items)
        if self.outcome.cancelled:
            logger.info("Cancel button pressed")
            return

        self.results = apply_all(utility, selection.items, self.outcome.choices, exists=self.exists)
        self._report(self.results, user)

    def run(self) -> int:
        try:
            self.execute()
        except SetDefaultAppsError as e:
            logger.error("ERROR: %s", e)
            return 1
        except OSError as e:
            # e.g. /var/tmp not writable for the dialog document
            logger.error("ERROR: %s", e)
            return 1
        return 0
