"""
Environmental factors and the capability of scoring them.

A ``Factor`` names a category of environmental influence (temperature,
humidity, ...).  An ``EcoFactor`` is one concrete value of a factor inside an
environment snapshot.  Anything that can turn an ``EcoFactor`` into a
``Fitness`` is an ``EcoFitness``; plain closures qualify.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

from ..exceptions import EvaluationError
from .fitness import Fitness, FunctionShape

X = TypeVar("X")
X_contra = TypeVar("X_contra", contravariant=True)


@dataclass(frozen=True)
class Factor:
    """Named category of environmental influence."""

    name: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Factor name cannot be empty.")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class EcoFactor(Generic[X]):
    """The value a factor takes in one environment snapshot."""

    factor: Factor
    value: X

    @property
    def name(self) -> str:
        return self.factor.name


class EcoFitness(Protocol[X_contra]):
    """Capability producing a fitness for a single environmental factor.

    Implementations signal failure by raising :class:`EvaluationError`.
    """

    def __call__(self, eco_factor: EcoFactor[X_contra]) -> Fitness:
        ...


def _is_nan(value: object) -> bool:
    return isinstance(value, numbers.Real) and math.isnan(value)


@dataclass(frozen=True)
class ShapedEcoFitness(Generic[X]):
    """Scores an ``EcoFactor`` by applying a shape to a fixed trait value."""

    trait: Any
    shape: FunctionShape[Any, X]

    def __call__(self, eco_factor: EcoFactor[X]) -> Fitness:
        context = {"factor": eco_factor.name, "shape": self.shape.shape, "trait": self.trait}
        if _is_nan(self.trait) or _is_nan(eco_factor.value):
            raise EvaluationError(
                f"Shape '{self.shape.shape}' cannot score NaN for factor '{eco_factor.name}'.",
                context={**context, "value": eco_factor.value},
            )
        try:
            return self.shape(self.trait, eco_factor.value)
        except (TypeError, ValueError, ArithmeticError) as exc:
            raise EvaluationError(
                f"Shape '{self.shape.shape}' failed for factor '{eco_factor.name}': {exc}",
                cause=exc,
                context=context,
            ) from exc

    def __repr__(self) -> str:
        return f"ShapedEcoFitness({self.shape.shape}, trait={self.trait!r})"


__all__ = ["Factor", "EcoFactor", "EcoFitness", "ShapedEcoFitness"]
