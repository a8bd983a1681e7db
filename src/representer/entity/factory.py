"""Entry point that binds domain objects to entity instances."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .entity import Entity


def is_collection(target: Any) -> bool:
    """Check whether a represent target is a sequence of objects."""
    return isinstance(target, (list, tuple))


def represent(
    entity_type: type[Entity],
    target: Any,
    options: Mapping[str, Any] | None = None,
) -> Entity | list[Entity]:
    """
    Instantiate one or more entities for a single object or a sequence.

    Each element of a sequence gets its own entity, constructed with
    ``{"collection": True}`` overridden by the caller's options. A single
    object gets the caller's options verbatim.

    Args:
        entity_type: The entity type to represent with
        target: A domain object, or a list/tuple of domain objects
        options: Options passed through to each entity

    Returns:
        An entity, or a list of entities for sequence input
    """
    options = options or {}

    if entity_type.config.freeze_on_represent:
        entity_type.exposures().freeze()

    if is_collection(target):
        collection_options = {"collection": True, **options}
        return [entity_type(obj, collection_options) for obj in target]

    return entity_type(target, options)
