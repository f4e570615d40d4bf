# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
import logging

import pytest

from projinfo.log_parser import (
    LogMessage,
    forward_log_messages,
    parse_log_line,
    parse_log_stream,
)


@pytest.mark.parametrize(
    "line",
    ["INFO: Analysis started\n", "ERROR: compilation failed", "WARN: careful", "plain output"],
)
def test_log_001_stdout_lines_are_info_with_text_unchanged(line: str) -> None:
    message = parse_log_line(line, stream="stdout")

    assert message == LogMessage(level="info", text=line.rstrip("\n"), stream="stdout")


@pytest.mark.parametrize(
    ("line", "level"),
    [
        ("WARN: deprecated option", "warning"),
        ("WARNING-ish text", "warning"),
        ("WARNINGS follow", "warning"),
        ("ERROR: boom", "error"),
        ("plain output", "error"),
        ("warn: lower case", "error"),
    ],
)
def test_log_002_stderr_lines_are_warnings_only_with_warn_prefix(
    line: str, level: str
) -> None:
    message = parse_log_line(line, stream="stderr")

    assert message == LogMessage(level=level, text=line, stream="stderr")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("line", "stream", "level", "text"),
    [
        ("DEBUG: details", "stdout", "debug", "details"),
        ("ERROR something broke", "stdout", "error", "something broke"),
        ("WARNING: careful", "stderr", "warning", "careful"),
        ("INFO: fine", "stderr", "info", "fine"),
        ("WARNING-ish text", "stderr", "warning", "WARNING-ish text"),
        ("plain output", "stdout", "info", "plain output"),
    ],
)
def test_log_003_prefix_decoding_is_opt_in(
    line: str, stream: str, level: str, text: str
) -> None:
    message = parse_log_line(line, stream=stream, decode_prefixes=True)  # type: ignore[arg-type]

    assert message is not None
    assert (message.level, message.text) == (level, text)


def test_log_004_blank_lines_are_ignored() -> None:
    assert parse_log_line(None) is None
    assert parse_log_line("   \r\n") is None
    messages = list(parse_log_stream(["INFO: a", "", "b\n"], stream="stdout"))
    assert [message.text for message in messages] == ["INFO: a", "b"]


def test_log_005_forwarded_messages_keep_their_levels(caplog) -> None:
    target = logging.getLogger("projinfo.tests.subprocess")
    messages = parse_log_stream(
        ["DEBUG: d", "WARN: w", "ERROR: e"], stream="stderr", decode_prefixes=True
    )

    with caplog.at_level(logging.DEBUG, logger="projinfo.tests.subprocess"):
        forwarded = forward_log_messages(messages, target)

    assert forwarded == 3
    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
        (logging.DEBUG, "d"),
        (logging.WARNING, "w"),
        (logging.ERROR, "e"),
    ]


def test_log_006_default_stderr_stream_forwards_raw_lines(caplog) -> None:
    target = logging.getLogger("projinfo.tests.subprocess")
    messages = parse_log_stream(["WARN: w", "fatal"], stream="stderr")

    with caplog.at_level(logging.DEBUG, logger="projinfo.tests.subprocess"):
        forward_log_messages(messages, target)

    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
        (logging.WARNING, "WARN: w"),
        (logging.ERROR, "fatal"),
    ]
