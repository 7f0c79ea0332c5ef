"""Case-insensitive name registry shared by fitness shapes and blend strategies."""

from __future__ import annotations

from typing import Dict, Generic, Iterator, TypeVar

V = TypeVar("V")


class Registry(Generic[V]):
    """Maps normalised names to registered items of one ``kind``."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._items: Dict[str, V] = {}

    @staticmethod
    def _key(name: str) -> str:
        return name.strip().lower()

    def register(self, name: str, item: V) -> V:
        key = self._key(name)
        if not key:
            raise ValueError(f"{self.kind.capitalize()} name cannot be empty.")
        self._items[key] = item
        return item

    def get(self, name: str) -> V:
        key = self._key(name)
        if key not in self._items:
            raise KeyError(f"{self.kind.capitalize()} '{name}' is not registered. Available: {sorted(self._items)}")
        return self._items[key]

    def available(self) -> Dict[str, V]:
        return dict(self._items)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._items))
