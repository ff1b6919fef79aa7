"""A small entity store: entities are integers carrying typed components."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from tinkerbench.map import Map

T = TypeVar("T")


class World:
    """Holds entities, their components and the current map."""

    def __init__(self, game_map: Map | None = None) -> None:
        self.game_map = game_map
        self._next_entity = 0
        self._stores: dict[type, dict[int, Any]] = {}

    def spawn(self, *components: Any) -> int:
        """Create an entity carrying ``components`` and return its id."""
        kinds = [type(component) for component in components]
        if len(set(kinds)) != len(kinds):
            raise ValueError("an entity can carry only one component of each type")
        entity = self._next_entity
        self._next_entity += 1
        for component in components:
            self._stores.setdefault(type(component), {})[entity] = component
        return entity

    def get(self, entity: int, component_type: type[T]) -> T | None:
        """Return the component of ``component_type`` on ``entity``, if any."""
        return self._stores.get(component_type, {}).get(entity)

    def query(self, *component_types: type) -> Iterator[tuple[Any, ...]]:
        """Yield ``(entity, component, ...)`` for entities having every type given."""
        if not component_types:
            raise ValueError("query needs at least one component type")
        stores = [self._stores.get(kind, {}) for kind in component_types]
        return self._join(stores)

    @staticmethod
    def _join(stores: list[dict[int, Any]]) -> Iterator[tuple[Any, ...]]:
        smallest = min(stores, key=len)
        for entity in sorted(smallest):
            if all(entity in store for store in stores):
                yield (entity, *(store[entity] for store in stores))