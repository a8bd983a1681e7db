"""
Thread-safe entity catalog.

Named lookup of entity types, used to resolve ``using`` references in
declaration files and by applications that pick an entity by name.
"""

import threading
from typing import Iterator

from .entity import Entity


class EntityCatalog:
    """
    Thread-safe registry of entity types by name.
    """

    def __init__(self):
        self._entities: dict[str, type[Entity]] = {}
        self._lock = threading.RLock()

    def register(self, entity_type: type[Entity], name: str | None = None) -> None:
        """
        Register an entity type.

        Args:
            entity_type: The entity type to register
            name: Name to register under (defaults to the class name)

        Raises:
            ValueError: If an entity with the same name already exists
        """
        name = name or entity_type.__name__
        with self._lock:
            if name in self._entities:
                raise ValueError(f"Entity '{name}' already registered")
            self._entities[name] = entity_type

    def register_many(self, entities: dict[str, type[Entity]]) -> None:
        """
        Register several entity types atomically.

        Args:
            entities: Mapping of name -> entity type

        Raises:
            ValueError: If any name is already registered; nothing is added
        """
        with self._lock:
            taken = [name for name in entities if name in self._entities]
            if taken:
                raise ValueError(f"Entity '{taken[0]}' already registered")
            self._entities.update(entities)

    def get(self, name: str) -> type[Entity] | None:
        """
        Get an entity type by name.

        Returns:
            The entity type if found, None otherwise
        """
        with self._lock:
            return self._entities.get(name)

    def get_or_raise(self, name: str) -> type[Entity]:
        """
        Get an entity type by name, raising if not found.

        Raises:
            KeyError: If the entity is not registered
        """
        with self._lock:
            if name not in self._entities:
                raise KeyError(f"Entity '{name}' not found")
            return self._entities[name]

    def names(self) -> list[str]:
        """Get all registered entity names, in registration order."""
        with self._lock:
            return list(self._entities)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._entities

    def __len__(self) -> int:
        with self._lock:
            return len(self._entities)

    def __iter__(self) -> Iterator[type[Entity]]:
        with self._lock:
            return iter(list(self._entities.values()))
