"""Entity types - bind domain objects to their exposures."""

from .entity import Entity
from .factory import represent
from .resolver import ValueResolver
from .catalog import EntityCatalog
from .loader import EntityLoader, load_entities

__all__ = [
    "Entity",
    "represent",
    "ValueResolver",
    "EntityCatalog",
    "EntityLoader",
    "load_entities",
]
