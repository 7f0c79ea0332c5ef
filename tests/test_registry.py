"""Tests for the name registry behind shapes and blends."""

import pytest

from ecofit.genetics.blend import blend_registry, multiplicative_blend
from ecofit.genetics.fitness import DELTA, shape_registry
from ecofit.utils.registry import Registry


def test_registry_normalises_names() -> None:
    registry = Registry("colour")
    assert registry.register(" Red ", 1) == 1
    assert registry.get("RED") == 1
    assert "red" in registry
    assert 3 not in registry
    assert list(registry) == ["red"]


def test_registry_rejects_empty_names() -> None:
    with pytest.raises(ValueError, match="Colour name cannot be empty"):
        Registry("colour").register("  ", 1)


def test_registry_unknown_name_lists_available() -> None:
    registry = Registry("colour")
    registry.register("red", 1)
    with pytest.raises(KeyError) as err:
        registry.get("blue")
    assert "Colour 'blue' is not registered" in str(err.value)
    assert "red" in str(err.value)


def test_shapes_and_blends_share_the_registry_type() -> None:
    assert isinstance(shape_registry, Registry) and isinstance(blend_registry, Registry)
    assert shape_registry.get("delta") is DELTA
    assert blend_registry.get("product") is multiplicative_blend

    snapshot = blend_registry.available()
    snapshot.clear()
    assert "product" in blend_registry.available()
