"""Tests for the timestamped log sink."""

from __future__ import annotations

import io
import logging
import re

from deploypick.logs import log, logger, setup_logging

_LINE = re.compile(r"^\[deploypick :: \d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] => (.*)$")


def test_log_line_format():
    stream = io.StringIO()
    setup_logging(stream=stream)
    log("deploying 3 files")
    lines = stream.getvalue().splitlines()
    assert len(lines) == 1
    match = _LINE.match(lines[0])
    assert match is not None
    assert match.group(1) == "deploying 3 files"


def test_log_ignores_empty_messages():
    stream = io.StringIO()
    setup_logging(stream=stream)
    log("")
    log(None)
    assert stream.getvalue() == ""


def test_log_converts_non_strings():
    stream = io.StringIO()
    setup_logging(stream=stream)
    log(42)
    assert stream.getvalue().rstrip().endswith("=> 42")


def test_setup_logging_replaces_previous_handler():
    first = io.StringIO()
    second = io.StringIO()
    setup_logging(stream=first)
    setup_logging(stream=second)
    log("once")
    assert first.getvalue() == ""
    assert second.getvalue().count("once") == 1
    assert len(logger.handlers) == 1


def test_setup_logging_level():
    stream = io.StringIO()
    setup_logging(logging.WARNING, stream=stream)
    log("hidden")
    assert stream.getvalue() == ""
