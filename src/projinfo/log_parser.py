# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Decode level-prefixed log lines from a subprocess output stream."""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Literal

logger = logging.getLogger(__name__)

LogLevel = Literal["debug", "info", "warning", "error"]
StreamName = Literal["stdout", "stderr"]

_LEVEL_PREFIX = re.compile(
    r"^(?P<level>DEBUG|INFO|WARNING|WARN|ERROR)(?::\s*|\s+)(?P<text>.*)$"
)
_LEVELS: dict[str, LogLevel] = {
    "DEBUG": "debug",
    "INFO": "info",
    "WARN": "warning",
    "WARNING": "warning",
    "ERROR": "error",
}
_LOGGING_LEVELS: dict[LogLevel, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


@dataclass(frozen=True)
class LogMessage:
    """Represent one decoded log line."""

    level: LogLevel
    text: str
    stream: StreamName


def parse_log_line(
    line: str | None, stream: StreamName = "stdout", decode_prefixes: bool = False
) -> LogMessage | None:
    """Decode one output line.

    Every stdout line is informational. A stderr line is a warning when it
    starts with ``WARN`` and an error otherwise. The text is kept as read.
    With ``decode_prefixes`` set, a leading ``LEVEL:`` prefix on either
    stream selects the level instead and is stripped from the text.

    Args:
        line: Raw output line, possibly with a trailing newline.
        stream: Stream the line was read from.
        decode_prefixes: Whether to honour explicit level prefixes.

    Returns:
        The decoded message, or ``None`` for blank lines.
    """
    if line is None:
        return None
    text = line.rstrip("\r\n")
    if not text.strip():
        return None
    if decode_prefixes:
        match = _LEVEL_PREFIX.match(text)
        if match:
            return LogMessage(
                level=_LEVELS[match.group("level")], text=match.group("text"), stream=stream
            )
    if stream == "stdout":
        level: LogLevel = "info"
    else:
        level = "warning" if text.startswith("WARN") else "error"
    return LogMessage(level=level, text=text, stream=stream)


def parse_log_stream(
    lines: Iterable[str], stream: StreamName = "stdout", decode_prefixes: bool = False
) -> Iterator[LogMessage]:
    """Decode every non-blank line of an output stream."""
    for line in lines:
        message = parse_log_line(line, stream=stream, decode_prefixes=decode_prefixes)
        if message is not None:
            yield message


def forward_log_messages(
    messages: Iterable[LogMessage], target: logging.Logger | None = None
) -> int:
    """Re-emit decoded messages on a logger at their own level.

    Args:
        messages: Decoded messages.
        target: Receiving logger. Defaults to this module's logger.

    Returns:
        Number of forwarded messages.
    """
    target = target or logger
    forwarded = 0
    for message in messages:
        target.log(_LOGGING_LEVELS[message.level], message.text)
        forwarded += 1
    return forwarded
