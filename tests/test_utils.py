"""Tests for logging and timing utilities."""

import logging

import pytest

from staticmap.utils import Timer, get_logger, timer


def test_get_logger_writes_file(tmp_path) -> None:
    log_file = tmp_path / "logs" / "build.txt"
    logger = get_logger("staticmap.test_file", log_file=log_file, level=logging.INFO)
    get_logger("staticmap.test_file", log_file=log_file)  # no duplicate handler

    logger.info("hello %d", 7)
    for h in logger.handlers:
        h.flush()

    assert log_file.read_text().count("hello 7") == 1


def test_timer_records_elapsed(caplog) -> None:
    log = get_logger("staticmap.test_timer", level=logging.INFO)
    with caplog.at_level(logging.INFO, logger="staticmap.test_timer"):
        with Timer("inserting", log=log) as t:
            sum(range(1000))

    assert t.elapsed >= 0.0
    assert "inserting took" in caplog.text


def test_timer_elapsed_before_use() -> None:
    with pytest.raises(ValueError):
        Timer().elapsed


def test_timer_function() -> None:
    with timer("block") as t:
        pass
    assert t.elapsed >= 0.0
