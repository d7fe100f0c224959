import re
import sys
from types import SimpleNamespace

import pytest
from loguru import logger

from core.logger import console_format, pick_color, setup_logging


def record(message, level="INFO"):
    return {"message": message, "level": SimpleNamespace(name=level)}


@pytest.mark.parametrize("message, level, color", [
    ("anything", "ERROR", "red"),
    ("anything", "WARNING", "yellow"),
    ("Login successful", "SUCCESS", "green"),
    ("Check-in process failed", "INFO", "red"),
    ("Daily sign-in successful (Day 7)", "INFO", "green"),
    ("Processing account 1/2", "INFO", "blue"),
    ("Current score: 10", "INFO", "yellow"),
    ("Waiting 5 seconds before next account...", "INFO", "magenta"),
    ("CoreSky check-in script initialized", "INFO", "white"),
])
def test_pick_color(message, level, color):
    assert pick_color(record(message, level)) == color


def test_console_format_wraps_message():
    fmt = console_format(record("Processing account 1/2"))

    assert "<blue>{message}</blue>" in fmt
    assert fmt.startswith("<light-black>[{time:YYYY-MM-DD HH:mm:ss}]</light-black>")


def test_file_sink_is_plain_and_timestamped(tmp_path):
    log_file = tmp_path / "coresky.log"
    log_file.write_text("[2024-01-01 00:00:00] previous run\n", encoding="utf-8")

    try:
        setup_logging(log_file)
        logger.info("Processing account 1/1")
    finally:
        logger.remove()
        logger.add(sys.stderr)

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "[2024-01-01 00:00:00] previous run"
    assert re.fullmatch(r"\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] Processing account 1/1", lines[1])
