"""
Fitness values and shaped fitness functions.

``Fitness`` measures the viability of an organism's phenotype in an
environment.  It is a float restricted to ``[0, 1]``; invalid values are
rejected at construction so that an out-of-range fitness can never exist.
Fitness values combine multiplicatively.

``FunctionShape`` pairs a ``(trait, env) -> Fitness`` function with a label
describing its qualitative shape.  Two reference shapes are registered:
``delta`` (a step up at the environment value) and ``delta-inv`` (its
complement).  Both compare with ``>=`` / ``<``, so NaN on either side
scores zero in both; ``ShapedEcoFitness`` rejects NaN before the shape runs.
User-defined shapes can be added to the registry with
:func:`register_shape`.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, TypeVar

from ..exceptions import DomainError
from ..utils.registry import Registry

T = TypeVar("T")
X = TypeVar("X")


@dataclass(frozen=True)
class Fitness:
    """Bounded viability score in the closed interval ``[0, 1]``."""

    value: float

    def __post_init__(self) -> None:
        if not isinstance(self.value, numbers.Real):
            raise DomainError(
                f"invalid Fitness: {self.value!r} is not a real number",
                context={"value": self.value},
            )
        value = float(self.value)
        # NaN fails both comparisons
        if not 0.0 <= value <= 1.0:
            raise DomainError(
                f"invalid Fitness: {value} must be in range 0..1",
                context={"value": value},
            )
        object.__setattr__(self, "value", value)

    def combine(self, other: "Fitness") -> "Fitness":
        """Return the product of this fitness and ``other``."""
        return Fitness(self.value * other.value)

    def __mul__(self, other: object) -> "Fitness":
        if not isinstance(other, Fitness):
            return NotImplemented
        return self.combine(other)

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return f"Fitness({self.value:g})"


FITNESS_ZERO = Fitness(0.0)
FITNESS_ONE = Fitness(1.0)


@dataclass(frozen=True)
class FunctionShape(Generic[T, X]):
    """A ``(trait, env) -> Fitness`` function tagged with its shape name."""

    shape: str
    function: Callable[[T, X], Fitness]

    def __call__(self, trait: T, env: X) -> Fitness:
        return self.function(trait, env)

    def __repr__(self) -> str:
        return f"FunctionShape({self.shape!r})"


shape_registry: Registry[FunctionShape[Any, Any]] = Registry("shape")


def register_shape(name: str):
    """Decorator turning a ``(trait, env) -> Fitness`` function into a registered shape."""

    def decorator(function: Callable[[Any, Any], Fitness]) -> FunctionShape[Any, Any]:
        return shape_registry.register(name, FunctionShape(name, function))

    return decorator


def get_shape(name: str) -> FunctionShape[Any, Any]:
    return shape_registry.get(name)


def list_shapes() -> Dict[str, FunctionShape[Any, Any]]:
    return shape_registry.available()


@register_shape("delta")
def DELTA(trait: float, env: float) -> Fitness:
    """Full fitness when the trait reaches the environment value, none otherwise."""
    return FITNESS_ONE if trait >= env else FITNESS_ZERO


@register_shape("delta-inv")
def INVERSE_DELTA(trait: float, env: float) -> Fitness:
    """Full fitness when the trait stays below the environment value, none otherwise."""
    return FITNESS_ONE if trait < env else FITNESS_ZERO


__all__ = [
    "Fitness",
    "FITNESS_ZERO",
    "FITNESS_ONE",
    "FunctionShape",
    "shape_registry",
    "register_shape",
    "get_shape",
    "list_shapes",
    "DELTA",
    "INVERSE_DELTA",
]
