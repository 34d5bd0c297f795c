"""Entities and the per-type containers that hold them."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Type, TypeVar

from pyrosim.index_vector import IndexVector

E = TypeVar("E", bound="Entity")


class Entity:
    """An object with a stable identifier that can ask to be removed."""

    def __init__(self, entity_id: int) -> None:
        self._id = entity_id
        self._remove_requested = False

    @property
    def id(self) -> int:
        return self._id

    @property
    def remove_requested(self) -> bool:
        return self._remove_requested

    def remove(self) -> None:
        """Mark the entity for removal at the end of the tick."""
        self._remove_requested = True


class EntityPack:
    """One IndexVector per registered entity type."""

    def __init__(self, entity_types: Iterable[type] = ()) -> None:
        self._containers: Dict[type, IndexVector[Any]] = {}
        for entity_type in entity_types:
            self.register(entity_type)

    def register(self, entity_type: Type[E]) -> IndexVector[E]:
        """Create the container for entity_type if it does not exist yet."""
        return self._containers.setdefault(entity_type, IndexVector())

    def container(self, entity_type: Type[E]) -> IndexVector[E]:
        try:
            return self._containers[entity_type]
        except KeyError:
            raise KeyError(f"entity type {entity_type.__name__} is not registered") from None

    def get(self, entity_type: Type[E], entity_id: int) -> E:
        return self.container(entity_type)[entity_id]

    def create(self, entity_type: Type[E], *args: Any, **kwargs: Any) -> int:
        """Build an entity with the identifier it will be stored under; return that identifier."""
        container = self.container(entity_type)
        entity_id = container.next_id()
        return container.append(entity_type(entity_id, *args, **kwargs))

    def count(self, entity_type: type) -> int:
        return len(self.container(entity_type))

    def remove_requested_entities(self) -> None:
        """Erase every entity that asked to be removed."""
        for container in self._containers.values():
            container.remove_if(lambda entity: entity.remove_requested)

    @property
    def types(self) -> list:
        return list(self._containers)