from __future__ import annotations

import logging
from io import StringIO

import pytest

from entry_export.logging.init import (
    LOGGER_NAME,
    LabeledFormatter,
    get_logger,
    log_summary,
    reset_logging,
    set_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _fresh_logging():
    reset_logging()
    yield
    reset_logging()


def test_setup_logging_attaches_labeled_stdout_handler():
    logger = setup_logging()

    assert logger.name == LOGGER_NAME
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, LabeledFormatter)
    assert logger.propagate is False


def test_setup_logging_is_idempotent():
    first = setup_logging()
    second = setup_logging(logging.DEBUG)
    assert first is second
    assert len(second.handlers) == 1
    # 2 回目の呼び出しはレベルを変えない
    assert second.level == logging.INFO


def test_get_logger_sets_up_when_needed():
    assert logging.getLogger(LOGGER_NAME).handlers == []
    logger = get_logger()
    assert len(logger.handlers) == 1


def test_labeled_lines_including_child_loggers():
    out = StringIO()
    logger = setup_logging(stream=out)

    logger.info("Exporting 2 entries")
    logging.getLogger(f"{LOGGER_NAME}.fields.factory").warning("enabled fields not in form 1: ['9']")
    logger.error("export: aborted")
    log_summary("entries=1")

    assert out.getvalue().splitlines() == [
        "INFO Exporting 2 entries",
        "WARN enabled fields not in form 1: ['9']",
        "ERROR export: aborted",
        "SUMMARY entries=1",
    ]


def test_set_level_enables_debug_output():
    out = StringIO()
    logger = setup_logging(stream=out)
    logger.debug("hidden")
    set_level("DEBUG")
    logger.debug("shown")
    assert out.getvalue().splitlines() == ["DEBUG shown"]


def test_reset_logging_detaches_handler():
    setup_logging()
    reset_logging()
    assert logging.getLogger(LOGGER_NAME).handlers == []


def test_log_summary_goes_to_stdout(capsys):
    setup_logging()
    log_summary("entries=2 columns=3")
    assert "SUMMARY entries=2 columns=3" in capsys.readouterr().out
