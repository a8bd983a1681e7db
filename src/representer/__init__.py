"""
Representer - declarative representations of domain objects.

Entity types declare which attributes of a domain object are exposed, under
which keys and under which conditions. Representing an object produces an
ordered mapping ready to be handed to a serializer.
"""

from .config import RepresenterConfig
from .entity import Entity, EntityCatalog, EntityLoader, load_entities, represent
from .exposure import (
    ConditionEvaluator,
    Exposure,
    ExposureRegistry,
    InvalidExposureDeclaration,
    KeyEquals,
    MissingAttribute,
    Predicate,
    RegistryFrozenError,
    RepresenterError,
)

__version__ = "0.1.0"

__all__ = [
    "RepresenterConfig",
    # Entities
    "Entity",
    "EntityCatalog",
    "EntityLoader",
    "load_entities",
    "represent",
    # Exposures
    "ConditionEvaluator",
    "Exposure",
    "ExposureRegistry",
    "KeyEquals",
    "Predicate",
    # Errors
    "InvalidExposureDeclaration",
    "MissingAttribute",
    "RegistryFrozenError",
    "RepresenterError",
]
