# -*- coding: utf-8 -*-
"""Two-pronged logging: a fixed log file plus stderr, one line per step."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "setdefaultapps"


def setup_logging(log_file: Optional[Path], level: int = logging.INFO) -> logging.Logger:
    """
    Attach a stderr handler and, when possible, a file handler to the
    package logger. Safe to call more than once.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
               for h in logger.handlers):
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(formatter)
        logger.addHandler(console)

    if log_file is not None and not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            log_file.parent.chmod(0o755)
            log_file.touch(exist_ok=True)
            log_file.chmod(0o644)
            file_handler = logging.FileHandler(log_file)
        except OSError as e:
            logger.warning("WARNING: Logging to console only, cannot open %s: %s", log_file, e)
        else:
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
    return logger
