from collections import defaultdict
from typing import Dict, Iterator, Optional, Tuple, Type, TypeVar

C = TypeVar("C")


class World:
    """Entity arena: each component type maps entity id -> component."""

    def __init__(self):
        self._next_entity = 1
        self._components: Dict[type, Dict[int, object]] = defaultdict(dict)

    # ---------- Entities ----------
    def create_entity(self, *components) -> int:
        entity = self._next_entity
        self._next_entity += 1
        for component in components:
            self.add_component(entity, component)
        return entity

    def remove_entity(self, entity: int):
        for store in self._components.values():
            store.pop(entity, None)

    # ---------- Components ----------
    def add_component(self, entity: int, component):
        self._components[type(component)][entity] = component
        return component

    def get_component(self, entity: int, component_type: Type[C]) -> Optional[C]:
        return self._components.get(component_type, {}).get(entity)

    def remove_component(self, entity: int, component_type: type):
        self._components.get(component_type, {}).pop(entity, None)

    def query(self, *component_types: type) -> Iterator[Tuple[int, tuple]]:
        """Yield (entity, components) for entities holding every given type."""
        if not component_types:
            return
        stores = [self._components.get(t, {}) for t in component_types]
        # Walk the smallest store, intersect with the rest
        smallest = min(stores, key=len)
        for entity in sorted(smallest):
            if all(entity in store for store in stores):
                yield entity, tuple(store[entity] for store in stores)

    def count(self, component_type: type) -> int:
        return len(self._components.get(component_type, {}))
