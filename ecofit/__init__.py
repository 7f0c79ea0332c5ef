"""Top-level package exposing the EcoFit fitness model."""

from .context import EvaluationContext
from .exceptions import DomainError, EcoFitConfigError, EcoFitError, EvaluationError, NoMatchingFactorsError
from .genetics import (
    DELTA,
    INVERSE_DELTA,
    Adaptation,
    Adaptatype,
    EcoFactor,
    EcoFitness,
    EvaluationOutcome,
    Factor,
    Fitness,
    FunctionShape,
    ShapedEcoFitness,
    multiplicative_blend,
)
from .sdk import EcoFit

__all__ = [
    "EcoFit",
    "EvaluationContext",
    "Adaptation",
    "Adaptatype",
    "EcoFactor",
    "EcoFitness",
    "EvaluationOutcome",
    "Factor",
    "Fitness",
    "FunctionShape",
    "ShapedEcoFitness",
    "DELTA",
    "INVERSE_DELTA",
    "multiplicative_blend",
    "EcoFitError",
    "DomainError",
    "NoMatchingFactorsError",
    "EvaluationError",
    "EcoFitConfigError",
]
