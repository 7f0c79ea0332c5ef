"""
Logging utilities built on Loguru.

Library code logs through the shared ``loguru.logger``.  ``configure_logging``
replaces the active handlers, and ``LoguruAuditSink`` routes audit trace
messages into the same logger at debug level.
"""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO, Union

from loguru import logger


def configure_logging(level: str = "WARNING", sink: Optional[Union[TextIO, str]] = None) -> int:
    """Reset Loguru handlers and install a single sink at ``level``.

    Returns the handler id so callers can remove it again.
    """

    logger.remove()
    return logger.add(sink if sink is not None else sys.stderr, level=level.upper())


class LoguruAuditSink:
    """Audit sink emitting each message through Loguru at debug level."""

    def __init__(self, name: str = "ecofit.audit") -> None:
        self.name = name
        self._logger: Any = logger.bind(audit=name)

    def __call__(self, message: str) -> None:
        self._logger.debug(message)

    def __repr__(self) -> str:
        return f"LoguruAuditSink({self.name!r})"
