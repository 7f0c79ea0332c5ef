"""
Centralised exception hierarchy for EcoFit.

Every failure the evaluation core can produce is a typed exception carrying a
``context`` dictionary, so the surrounding evolutionary loop can decide whether
a failed evaluation means "treat as zero fitness", "retry with a different
environment" or "abort the organism" without parsing messages.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional


class EcoFitError(Exception):
    """Base class for all EcoFit specific exceptions."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


class DomainError(EcoFitError, ValueError):
    """Raised when a fitness value outside ``[0, 1]`` is constructed."""


class NoMatchingFactorsError(EcoFitError):
    """Raised when an adaptatype shares no factor with the supplied environment."""

    def __init__(self, environment_keys: Iterable[str], expected_factors: Iterable[str]) -> None:
        self.environment_keys = tuple(environment_keys)
        self.expected_factors = tuple(expected_factors)
        super().__init__(
            "The environment did not match any adaptations: "
            f"environment keys: {list(self.environment_keys)}; "
            f"expected factors: {list(self.expected_factors)}",
            context={
                "environment_keys": list(self.environment_keys),
                "expected_factors": list(self.expected_factors),
            },
        )


class EvaluationError(EcoFitError):
    """Raised when a fitness capability fails for a matched factor."""

    def __init__(
        self,
        message: str,
        *,
        cause: Optional[BaseException] = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context=context)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class EcoFitConfigError(EcoFitError, ValueError):
    """Raised for configuration related issues."""


__all__ = [
    "EcoFitError",
    "DomainError",
    "NoMatchingFactorsError",
    "EvaluationError",
    "EcoFitConfigError",
]
