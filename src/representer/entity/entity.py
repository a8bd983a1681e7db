"""
Entity - a declarative representation of a domain object.

An entity type declares which attributes of a domain object are exposed,
under which names and under which conditions. Representing an object binds
it to an entity instance whose ``serializable_hash`` builds the output
mapping handed to whatever serializes the response.

Example:
    class Status(Entity):
        pass

    Status.expose("text", "created_at")

    class User(Entity):
        pass

    User.expose("first_name", "last_name")
    User.expose("latest_status", using=Status, as_="status",
                unless={"collection": True})
    User.expose("email", if_={"type": "full"})
    User.expose("name", lambda user, options: f"{user.first_name} {user.last_name}")

    User.represent(users, {"type": "full"})
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from ..config import DEFAULT_CONFIG, RepresenterConfig
from ..exposure.conditions import ConditionEvaluator
from ..exposure.errors import InvalidExposureDeclaration
from ..exposure.registry import ExposureRegistry
from ..exposure.types import Exposure
from .factory import represent as _represent
from .resolver import ValueResolver

_evaluator = ConditionEvaluator()

# The base class is abstract: its registry stays empty and read-only
_base_exposures = ExposureRegistry(owner="Entity")
_base_exposures.freeze()

# Python keywords cannot be used as keyword arguments
_OPTION_ALIASES = {"as_": "as", "if_": "if"}


class Entity:
    """Base class for entity types.

    Every subclass owns an independent exposure registry; exposures are
    not inherited from parent entity types. ``Entity`` itself declares
    nothing and rejects ``expose``.
    """

    config: ClassVar[RepresenterConfig] = DEFAULT_CONFIG
    _exposures: ClassVar[ExposureRegistry] = _base_exposures

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._exposures = ExposureRegistry(owner=cls.__qualname__)

    def __init__(self, obj: Any, options: Mapping[str, Any] | None = None):
        self.object = obj
        self.options = dict(options or {})

    # =========================================================================
    # Declaration
    # =========================================================================

    @classmethod
    def expose(cls, *args: Any, **options: Any) -> list[Exposure]:
        """
        Declare one or more exposed attributes.

        Options:
            as_ / as: Output key for this attribute (single attribute only)
            if_ / if: Mapping of option values that must all match, or a
                callable ``(object, options)`` that must return truthy
            unless: Mapping of option values of which none may match, or a
                callable ``(object, options)`` that must return falsy
            using: Entity type used to represent the attribute's value;
                lists and tuples are detected and represented element-wise
            proc: Callable ``(object, options)`` computing the value
                (single attribute only)

        A trailing positional callable is equivalent to ``proc``.

        Raises:
            InvalidExposureDeclaration: If the declaration is malformed
        """
        if cls is Entity:
            raise InvalidExposureDeclaration(
                "Exposures must be declared on a subclass of Entity."
            )

        attributes = list(args)
        if attributes and callable(attributes[-1]):
            if "proc" in options:
                raise InvalidExposureDeclaration(
                    "Pass the value function either positionally or as proc, not both."
                )
            options["proc"] = attributes.pop()

        normalized: dict[str, Any] = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key, key)
            if name in normalized:
                raise InvalidExposureDeclaration(
                    f"The :{name} option was given more than once."
                )
            normalized[name] = value
        return cls._exposures.register(attributes, normalized)

    @classmethod
    def exposures(cls) -> ExposureRegistry:
        """Return the exposure registry of this entity type."""
        return cls._exposures

    @classmethod
    def represent(
        cls, objects: Any, options: Mapping[str, Any] | None = None
    ) -> Entity | list[Entity]:
        """
        Instantiate entities for one object or a list/tuple of objects.

        Args:
            objects: One domain object, or a list/tuple of them
            options: Options passed through to each entity

        Returns:
            An entity for a single object, a list of entities for a sequence
        """
        return _represent(cls, objects, options)

    # =========================================================================
    # Output
    # =========================================================================

    def serializable_hash(
        self, runtime_options: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """
        Build the output mapping for the bound object.

        Args:
            runtime_options: Options overriding those the entity was
                created with, for this call only

        Returns:
            Ordered mapping of output key to value

        Raises:
            MissingAttribute: If the object lacks an exposed attribute
        """
        context = {**self.options, **(runtime_options or {})}

        output: dict[str, Any] = {}
        for exposure in self.exposures():
            if self.conditions_met(exposure, context):
                output[self.key_for(exposure)] = self.value_for(exposure, context)
        return output

    to_dict = serializable_hash

    def key_for(self, exposure: Exposure) -> str:
        return exposure.key

    def value_for(self, exposure: Exposure, context: Mapping[str, Any]) -> Any:
        return ValueResolver(self.config).resolve(exposure, self.object, context)

    def conditions_met(self, exposure: Exposure, context: Mapping[str, Any]) -> bool:
        return _evaluator.is_exposed(exposure, self.object, context)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(object={self.object!r}, options={self.options!r})"
