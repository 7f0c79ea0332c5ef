"""
Audit trace side-channel for fitness evaluation.

An ``Auditor`` lets evaluation code "see" intermediate values without breaking
up expressions: :meth:`Auditor.audit` returns the value it was given and, when
auditing is enabled, forwards a formatted message to an injected sink.  There
is no process-wide switch; turning auditing off means passing an auditor built
with ``enabled=False`` (see :meth:`Auditor.disabled`).

Sinks are fire-and-forget.  A failing sink is reported through Loguru and
never changes the value flowing through the audit call.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import List, Optional, Protocol, TextIO, TypeVar

from loguru import logger

V = TypeVar("V")

BRACKETS = "{}"
DEFAULT_PREFIX = "audit: "


class AuditSink(Protocol):
    """Destination for formatted audit messages."""

    def __call__(self, message: str) -> None:
        ...


class NullAuditSink:
    """Sink that discards every message."""

    def __call__(self, message: str) -> None:
        return None

    def __repr__(self) -> str:
        return "NullAuditSink()"


class StreamAuditSink:
    """Sink writing one line per message to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def __call__(self, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(message + "\n")

    def __repr__(self) -> str:
        return "StreamAuditSink()"


class ListAuditSink:
    """Sink collecting messages in memory."""

    def __init__(self) -> None:
        self.messages: List[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)

    def __repr__(self) -> str:
        return f"ListAuditSink({len(self.messages)} messages)"


def format_value(value: object) -> str:
    if value is None:
        return "<<None>>"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(str(item) for item in value) + "]"
    return str(value)


@dataclass(frozen=True)
class Auditor:
    """Formats audit messages and forwards them to a sink when enabled."""

    sink: AuditSink = field(default_factory=NullAuditSink)
    enabled: bool = True
    prefix: str = DEFAULT_PREFIX

    def audit(self, message: str, value: V) -> V:
        """
        Return ``value`` unchanged, emitting ``message`` about it on the way.

        ``{}`` in ``message`` is replaced by the formatted value; without a
        placeholder the value is appended after ``": "``.
        """

        if self.enabled:
            template = message if BRACKETS in message else f"{message}: {BRACKETS}"
            self._emit(template.replace(BRACKETS, format_value(value)))
        return value

    def failure(self, message: str, exc: BaseException) -> None:
        """Record that the expression described by ``message`` raised ``exc``."""
        if self.enabled:
            self._emit(f"{message}: <<Exception thrown: {exc}>>")

    def debug(self, message: str) -> None:
        if self.enabled:
            self._emit(message)

    def disabled(self) -> "Auditor":
        return replace(self, enabled=False)

    def _emit(self, message: str) -> None:
        try:
            self.sink(self.prefix + message)
        except Exception:  # noqa: BLE001 - sink failures must not affect evaluation
            logger.opt(exception=True).warning("Audit sink {!r} failed; message dropped.", self.sink)


NULL_AUDITOR = Auditor(sink=NullAuditSink(), enabled=False)


__all__ = [
    "AuditSink",
    "NullAuditSink",
    "StreamAuditSink",
    "ListAuditSink",
    "Auditor",
    "NULL_AUDITOR",
    "format_value",
]
