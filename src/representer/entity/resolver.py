"""Value resolution for active exposures."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..config import DEFAULT_CONFIG, RepresenterConfig
from ..exposure.types import Exposure


class ValueResolver:
    """
    Computes the output value of an exposure.

    Resolution order (first match wins):
    1. ``compute_fn`` - called with (object, context), result used verbatim
    2. ``delegate``   - attribute value represented by the delegate entity type
    3. direct read of the attribute

    Delegated values are built eagerly: the result is the delegate's output
    mapping, or a list of mappings when the attribute holds a sequence.
    """

    def __init__(self, config: RepresenterConfig = DEFAULT_CONFIG):
        self.config = config

    def resolve(self, exposure: Exposure, obj: Any, context: Mapping[str, Any]) -> Any:
        if exposure.compute_fn is not None:
            return exposure.compute_fn(obj, context)

        if exposure.delegate is not None:
            raw = exposure.accessor(obj)
            return self._represent_delegate(exposure, raw, context)

        return exposure.accessor(obj)

    def _represent_delegate(
        self, exposure: Exposure, raw: Any, context: Mapping[str, Any]
    ) -> Any:
        options = dict(context) if self.config.inherit_delegate_options else {}
        represented = exposure.delegate.represent(raw, options)
        if isinstance(represented, list):
            return [entity.serializable_hash() for entity in represented]
        return represented.serializable_hash()
