import json
import logging

import pytest

from hashcrack.logsetup import new_logger


@pytest.mark.parametrize(
    "level, expected",
    [
        ("debug", logging.DEBUG),
        ("info", logging.INFO),
        ("warn", logging.WARNING),
        ("error", logging.ERROR),
        ("verbose", logging.INFO),
        ("", logging.INFO),
    ],
)
def test_level_mapping(level, expected):
    logger = new_logger(level, f"test.levels.{level or 'empty'}")
    assert logger.level == expected


def test_output_is_json_with_fields(capsys):
    logger = new_logger("info", "test.json")
    logger.warning("request timed out", extra={"requestId": "r-1"})
    line = capsys.readouterr().out.strip()
    entry = json.loads(line)
    assert entry["msg"] == "request timed out"
    assert entry["level"] == "WARN"
    assert entry["requestId"] == "r-1"


def test_debug_filtered_at_info(capsys):
    logger = new_logger("info", "test.filter")
    logger.debug("hidden")
    assert capsys.readouterr().out == ""


def test_repeated_calls_keep_one_handler():
    new_logger("info", "test.repeat")
    logger = new_logger("error", "test.repeat")
    assert len(logger.handlers) == 1
    assert logger.level == logging.ERROR