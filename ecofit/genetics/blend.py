"""
Blend strategies folding several fitness values into one.

A blend is any pure function ``Sequence[Fitness] -> Fitness``.  The default,
:func:`multiplicative_blend`, compounds the values so that an organism poorly
adapted to any single factor is dragged towards zero overall.
"""

from __future__ import annotations

import operator
from functools import reduce
from typing import Callable, Dict, Sequence

import numpy as np

from ..utils.registry import Registry
from .fitness import Fitness

Blend = Callable[[Sequence[Fitness]], Fitness]


def _values(fitnesses: Sequence[Fitness]) -> np.ndarray:
    if len(fitnesses) == 0:
        raise ValueError("Cannot blend an empty sequence of fitness values.")
    return np.fromiter((f.value for f in fitnesses), dtype=float, count=len(fitnesses))


def multiplicative_blend(fitnesses: Sequence[Fitness]) -> Fitness:
    """Iterated multiplication of the fitness values."""
    if len(fitnesses) == 0:
        raise ValueError("Cannot blend an empty sequence of fitness values.")
    return reduce(operator.mul, fitnesses)


def minimum_blend(fitnesses: Sequence[Fitness]) -> Fitness:
    """The weakest adaptation decides the overall fitness."""
    return Fitness(float(np.min(_values(fitnesses))))


def mean_blend(fitnesses: Sequence[Fitness]) -> Fitness:
    return Fitness(float(np.clip(np.mean(_values(fitnesses)), 0.0, 1.0)))


def geometric_mean_blend(fitnesses: Sequence[Fitness]) -> Fitness:
    """Multiplicative blend normalised for the number of factors."""
    values = _values(fitnesses)
    product = float(np.prod(values))
    return Fitness(float(np.clip(product ** (1.0 / len(values)), 0.0, 1.0)))


def weighted_blend(weights: Sequence[float]) -> Blend:
    """
    Build a weighted arithmetic-mean blend.

    The weights are positional: the i-th weight applies to the i-th matched
    adaptation, in adaptatype order.
    """

    w = np.asarray(weights, dtype=float)
    if w.ndim != 1 or w.size == 0:
        raise ValueError("Weights must be a non-empty sequence.")
    if np.any(w < 0) or not np.all(np.isfinite(w)) or w.sum() == 0:
        raise ValueError(f"Weights must be finite, non-negative and not all zero: {list(weights)}")

    def blend(fitnesses: Sequence[Fitness]) -> Fitness:
        values = _values(fitnesses)
        if values.size != w.size:
            raise ValueError(f"Expected {w.size} fitness values for the configured weights, got {values.size}.")
        return Fitness(float(np.clip(np.dot(values, w) / w.sum(), 0.0, 1.0)))

    return blend


# Blends selectable by name from configuration.
blend_registry: Registry[Blend] = Registry("blend")


def register_blend(name: str):
    """Decorator registering blend strategies in the global registry."""

    def decorator(blend: Blend) -> Blend:
        blend_registry.register(name, blend)
        return blend

    return decorator


def get_blend(name: str) -> Blend:
    return blend_registry.get(name)


def list_blends() -> Dict[str, Blend]:
    return blend_registry.available()


blend_registry.register("product", multiplicative_blend)
blend_registry.register("minimum", minimum_blend)
blend_registry.register("mean", mean_blend)
blend_registry.register("geometric_mean", geometric_mean_blend)


__all__ = [
    "Blend",
    "multiplicative_blend",
    "minimum_blend",
    "mean_blend",
    "geometric_mean_blend",
    "weighted_blend",
    "blend_registry",
    "register_blend",
    "get_blend",
    "list_blends",
]
