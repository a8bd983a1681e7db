"""
Exposure registry - the per-entity-type table of declared exposures.

Each entity type owns exactly one registry. It is filled by registration
calls while the type is being defined and is read-only afterwards; no
registry is shared with or inherited from another entity type.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Iterator

from .errors import InvalidExposureDeclaration, RegistryFrozenError
from .types import Exposure, coerce_condition

logger = logging.getLogger(__name__)

EXPOSURE_OPTIONS = frozenset({"as", "if", "unless", "using", "proc"})


class ExposureRegistry:
    """
    Ordered, append-only table of attribute → Exposure.

    Registration is single-writer: all ``register`` calls must complete
    before the registry is read concurrently. ``freeze`` makes any later
    registration fail.
    """

    def __init__(self, owner: str = ""):
        self.owner = owner
        self._exposures: dict[str, Exposure] = {}
        self._frozen = False

    def register(
        self,
        attributes: Iterable[str],
        options: Mapping[str, Any] | None = None,
    ) -> list[Exposure]:
        """
        Register one exposure per attribute, all sharing the same options.

        Args:
            attributes: Attribute names to read from the domain object
            options: Any of ``as``, ``if``, ``unless``, ``using``, ``proc``

        Returns:
            The exposures that were added, in declaration order

        Raises:
            InvalidExposureDeclaration: If the declaration is malformed; the
                registry is left untouched
            RegistryFrozenError: If the registry has been frozen
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Exposures of {self.owner or 'this entity'} can no longer be changed"
            )

        attributes = list(attributes)
        options = dict(options or {})
        self._validate(attributes, options)

        if_condition = coerce_condition(options.get("if"), "if")
        unless_condition = coerce_condition(options.get("unless"), "unless")

        added = [
            Exposure(
                attribute=attribute,
                alias=options.get("as"),
                if_condition=if_condition,
                unless_condition=unless_condition,
                delegate=options.get("using"),
                compute_fn=options.get("proc"),
            )
            for attribute in attributes
        ]

        for exposure in added:
            if exposure.attribute in self._exposures:
                logger.warning(
                    f"Exposure '{exposure.attribute}' on {self.owner} redeclared, "
                    "replacing earlier declaration"
                )
            # Reassigning an existing key keeps its original position
            self._exposures[exposure.attribute] = exposure
            logger.debug(f"Registered exposure {self.owner}.{exposure.attribute} -> {exposure.key}")

        return added

    def _validate(self, attributes: list[str], options: dict[str, Any]) -> None:
        if not attributes:
            raise InvalidExposureDeclaration("At least one attribute must be exposed.")

        for attribute in attributes:
            if not isinstance(attribute, str) or not attribute:
                raise InvalidExposureDeclaration(
                    f"Attribute names must be non-empty strings, got {attribute!r}"
                )

        unknown = set(options) - EXPOSURE_OPTIONS
        if unknown:
            raise InvalidExposureDeclaration(
                f"Unknown exposure option(s): {', '.join(sorted(unknown))}"
            )

        if len(attributes) > 1:
            if options.get("as"):
                raise InvalidExposureDeclaration(
                    "You may not use the :as option on multi-attribute exposures."
                )
            if options.get("proc"):
                raise InvalidExposureDeclaration(
                    "You may not use block-setting on multi-attribute exposures."
                )

        proc = options.get("proc")
        if proc is not None and not callable(proc):
            raise InvalidExposureDeclaration("The :proc option must be callable.")

        using = options.get("using")
        if using is not None and not callable(getattr(using, "represent", None)):
            raise InvalidExposureDeclaration(
                f"The :using option must be an entity type, got {using!r}"
            )

    def get(self, attribute: str) -> Exposure | None:
        """Get the exposure declared for an attribute."""
        return self._exposures.get(attribute)

    def all(self) -> list[Exposure]:
        """Return all exposures in declaration order."""
        return list(self._exposures.values())

    def attributes(self) -> list[str]:
        """Return declared attribute names in declaration order."""
        return list(self._exposures)

    def freeze(self) -> None:
        """Make the registry read-only."""
        if not self._frozen:
            self._frozen = True
            logger.debug(f"Froze exposures of {self.owner} ({len(self._exposures)} declared)")

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __iter__(self) -> Iterator[Exposure]:
        return iter(self._exposures.values())

    def __len__(self) -> int:
        return len(self._exposures)

    def __contains__(self, attribute: object) -> bool:
        return attribute in self._exposures

    def __repr__(self) -> str:
        return f"ExposureRegistry(owner={self.owner!r}, attributes={self.attributes()!r})"
