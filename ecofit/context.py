"""
Explicit evaluation context.

Whether auditing is on, where audit messages go and which blend is used by
default are configuration, passed into each evaluation through an
``EvaluationContext`` rather than held in module-level state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union

from .exceptions import EcoFitConfigError
from .genetics.blend import Blend, get_blend, multiplicative_blend
from .utils.audit import NULL_AUDITOR, Auditor, AuditSink, NullAuditSink, StreamAuditSink
from .utils.config_loader import ConfigLoader, LoadedConfig
from .utils.logger import LoguruAuditSink

SINK_FACTORIES: Dict[str, Callable[[], AuditSink]] = {
    "none": NullAuditSink,
    "loguru": LoguruAuditSink,
    "stdout": StreamAuditSink,
}


def build_sink(name: str) -> AuditSink:
    key = str(name).strip().lower()
    if key not in SINK_FACTORIES:
        raise EcoFitConfigError(
            f"Unknown audit sink '{name}'. Options: {sorted(SINK_FACTORIES)}",
            context={"sink": name},
        )
    return SINK_FACTORIES[key]()


@dataclass(frozen=True)
class EvaluationContext:
    """Auditor and default blend used by an evaluation."""

    auditor: Auditor = NULL_AUDITOR
    blend: Blend = multiplicative_blend

    @classmethod
    def from_config(cls, config: Optional[Union[LoadedConfig, Dict[str, object]]] = None) -> "EvaluationContext":
        """Build a context from a loaded configuration (or raw overrides)."""

        if not isinstance(config, LoadedConfig):
            config = ConfigLoader().load(overrides=config)
        blend_name = config.get("evaluation", "blend")
        try:
            blend = get_blend(blend_name)
        except KeyError as exc:
            raise EcoFitConfigError(str(exc), context={"blend": blend_name}) from exc
        auditor = Auditor(
            sink=build_sink(config.get("audit", "sink")),
            enabled=bool(config.get("audit", "enabled")),
            prefix=str(config.get("audit", "prefix")),
        )
        return cls(auditor=auditor, blend=blend)

    def without_audit(self) -> "EvaluationContext":
        return EvaluationContext(auditor=self.auditor.disabled(), blend=self.blend)


DEFAULT_CONTEXT = EvaluationContext()

__all__ = ["EvaluationContext", "DEFAULT_CONTEXT", "build_sink", "SINK_FACTORIES"]
