"""Utility exports for EcoFit."""

from .audit import NULL_AUDITOR, Auditor, AuditSink, ListAuditSink, NullAuditSink, StreamAuditSink
from .config_loader import ConfigLoader, LoadedConfig
from .logger import LoguruAuditSink, configure_logging

__all__ = [
    "Auditor",
    "AuditSink",
    "NULL_AUDITOR",
    "NullAuditSink",
    "ListAuditSink",
    "StreamAuditSink",
    "LoguruAuditSink",
    "ConfigLoader",
    "LoadedConfig",
    "configure_logging",
]
