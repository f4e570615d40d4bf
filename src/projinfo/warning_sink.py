# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Warning sink contract used by the project data builder."""

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class WarningSink(Protocol):
    """Accept formatted warning lines."""

    def warn(self, message: str) -> None:
        """Record one warning line."""


class LoggingWarningSink:
    """Forward warning lines to a standard library logger."""

    def __init__(self, target: logging.Logger | None = None) -> None:
        """Initialize the sink.

        Args:
            target: Logger receiving the warnings. Defaults to this module's logger.
        """
        self._target = target or logger

    def warn(self, message: str) -> None:
        self._target.warning(message)
