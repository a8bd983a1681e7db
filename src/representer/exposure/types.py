"""
Exposure data types.

An Exposure is one declared attribute mapping on an entity type:

    attribute  →  condition(s)  →  value source (compute fn | delegate | accessor)
        ↓              ↓                        ↓
    "What to read"  "When to show it"    "How to produce the value"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Union

from .errors import InvalidExposureDeclaration, MissingAttribute

if TYPE_CHECKING:
    from ..entity.entity import Entity


ComputeFn = Callable[[Any, Mapping[str, Any]], Any]
PredicateFn = Callable[[Any, Mapping[str, Any]], Any]


@dataclass(frozen=True, slots=True)
class KeyEquals:
    """Condition comparing option keys against expected values."""

    expected: Mapping[str, Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "expected", MappingProxyType(dict(self.expected)))

    def items(self):
        return self.expected.items()


@dataclass(frozen=True, slots=True)
class Predicate:
    """Condition delegating to a function of (object, options)."""

    fn: PredicateFn

    def __call__(self, obj: Any, options: Mapping[str, Any]) -> bool:
        return bool(self.fn(obj, options))


Condition = Union[KeyEquals, Predicate, None]


def coerce_condition(value: Any, option_name: str) -> Condition:
    """Turn a raw ``if``/``unless`` declaration value into a Condition.

    Args:
        value: A mapping, a callable, an existing Condition, or None
        option_name: Option being coerced, used in error messages

    Raises:
        InvalidExposureDeclaration: If the value is none of the above
    """
    if value is None or isinstance(value, (KeyEquals, Predicate)):
        return value
    if isinstance(value, Mapping):
        return KeyEquals(value)
    if callable(value):
        return Predicate(value)
    raise InvalidExposureDeclaration(
        f"The :{option_name} option must be a mapping or a callable, "
        f"got {type(value).__name__}"
    )


@dataclass(frozen=True, slots=True)
class Accessor:
    """Reads one named attribute from a domain object.

    Objects are read by attribute (plain attributes and properties);
    mappings are read by key.
    """

    attribute: str

    def __call__(self, obj: Any) -> Any:
        if isinstance(obj, Mapping):
            try:
                return obj[self.attribute]
            except KeyError:
                raise MissingAttribute(self.attribute, obj) from None
        try:
            return getattr(obj, self.attribute)
        except AttributeError as e:
            raise MissingAttribute(self.attribute, obj) from e


@dataclass(frozen=True, slots=True)
class Exposure:
    """A single declared attribute → output key mapping."""

    attribute: str
    alias: str | None = None
    if_condition: Condition = None
    unless_condition: Condition = None
    delegate: type[Entity] | None = None
    compute_fn: ComputeFn | None = None
    accessor: Accessor = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "accessor", Accessor(self.attribute))

    @property
    def key(self) -> str:
        """Output key: the alias if declared, else the attribute name."""
        return self.alias or self.attribute

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation (for introspection)."""
        result: dict[str, Any] = {"attribute": self.attribute}
        if self.alias:
            result["as"] = self.alias
        if isinstance(self.if_condition, KeyEquals):
            result["if"] = dict(self.if_condition.expected)
        elif self.if_condition is not None:
            result["if"] = "<predicate>"
        if isinstance(self.unless_condition, KeyEquals):
            result["unless"] = dict(self.unless_condition.expected)
        elif self.unless_condition is not None:
            result["unless"] = "<predicate>"
        if self.delegate is not None:
            result["using"] = self.delegate.__name__
        if self.compute_fn is not None:
            result["proc"] = True
        return result
