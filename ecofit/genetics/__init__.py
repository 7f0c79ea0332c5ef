"""Fitness data model exports."""

from .adaptation import Adaptation, Adaptatype, EvaluationOutcome
from .blend import (
    geometric_mean_blend,
    get_blend,
    list_blends,
    mean_blend,
    minimum_blend,
    multiplicative_blend,
    register_blend,
    weighted_blend,
)
from .ecology import EcoFactor, EcoFitness, Factor, ShapedEcoFitness
from .fitness import (
    DELTA,
    FITNESS_ONE,
    FITNESS_ZERO,
    INVERSE_DELTA,
    Fitness,
    FunctionShape,
    get_shape,
    list_shapes,
    register_shape,
)

__all__ = [
    "Adaptation",
    "Adaptatype",
    "EvaluationOutcome",
    "EcoFactor",
    "EcoFitness",
    "Factor",
    "ShapedEcoFitness",
    "Fitness",
    "FITNESS_ONE",
    "FITNESS_ZERO",
    "FunctionShape",
    "DELTA",
    "INVERSE_DELTA",
    "get_shape",
    "list_shapes",
    "register_shape",
    "multiplicative_blend",
    "minimum_blend",
    "mean_blend",
    "geometric_mean_blend",
    "weighted_blend",
    "get_blend",
    "list_blends",
    "register_blend",
]
