import logging
import re

import pytest

from setdefaultapps.logs import ROOT_LOGGER, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(ROOT_LOGGER)
    saved = (list(logger.handlers), logger.propagate, logger.level)
    logger.handlers = []
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers, logger.propagate, logger.level = saved[0], saved[1], saved[2]


def test_logs_to_file_with_timestamp(tmp_path, package_logger):
    log_file = tmp_path / "logs" / "SetDefaultApps.log"
    setup_logging(log_file)
    setup_logging(log_file)
    assert len(package_logger.handlers) == 2

    logging.getLogger("setdefaultapps.app").info("Constructing application list(s)")
    for handler in package_logger.handlers:
        handler.flush()

    line = log_file.read_text(encoding="utf-8").strip()
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}: Constructing application list\(s\)", line)


def test_unwritable_log_falls_back_to_console(tmp_path, package_logger):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    setup_logging(blocker / "sub" / "x.log")
    assert [type(h) for h in package_logger.handlers] == [logging.StreamHandler]
