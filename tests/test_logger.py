# File: tests/test_logger.py
import logging

import pytest
from site_checker.logger import LOGGER_NAME, configure, init_logging, set_level


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    lg = logging.getLogger(LOGGER_NAME)
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()


def test_reconfigure_does_not_duplicate_handlers():
    init_logging("INFO")
    lg = init_logging("WARNING")
    assert len(lg.handlers) == 1
    assert lg.level == logging.WARNING
    assert lg.propagate is False


def test_file_handler_writes_timestamped_lines(tmp_path):
    log_file = tmp_path / "logs" / "run.log"
    lg = configure(level="DEBUG", log_file=log_file)
    lg.debug("[fetch] %s", "http://example.com/")
    for handler in lg.handlers:
        handler.flush()

    line = log_file.read_text(encoding="utf-8").strip()
    assert line.endswith("| DEBUG    | SiteChecker | [fetch] http://example.com/")


def test_set_level_keeps_handlers(tmp_path):
    lg = init_logging("INFO", tmp_path / "run.log")
    handlers = list(lg.handlers)
    set_level("DEBUG")
    assert lg.level == logging.DEBUG
    assert lg.handlers == handlers
