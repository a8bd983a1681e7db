"""Condition evaluation for exposures."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .types import Condition, Exposure, KeyEquals, Predicate


class ConditionEvaluator:
    """
    Decides whether an exposure is active for a given object and context.

    The ``if`` condition is checked before ``unless``; evaluation stops at
    the first failing step, and each predicate is called at most once.
    """

    def is_exposed(
        self,
        exposure: Exposure,
        obj: Any,
        context: Mapping[str, Any],
    ) -> bool:
        """Return True if the exposure should appear in the output."""
        if not self._if_passes(exposure.if_condition, obj, context):
            return False
        return self._unless_passes(exposure.unless_condition, obj, context)

    def _if_passes(
        self, condition: Condition, obj: Any, context: Mapping[str, Any]
    ) -> bool:
        if condition is None:
            return True
        if isinstance(condition, KeyEquals):
            # Every key must match
            return all(context.get(k) == v for k, v in condition.items())
        if isinstance(condition, Predicate):
            return condition(obj, context)
        raise TypeError(f"Unknown condition type: {type(condition).__name__}")

    def _unless_passes(
        self, condition: Condition, obj: Any, context: Mapping[str, Any]
    ) -> bool:
        if condition is None:
            return True
        if isinstance(condition, KeyEquals):
            # A single match excludes
            return not any(context.get(k) == v for k, v in condition.items())
        if isinstance(condition, Predicate):
            return not condition(obj, context)
        raise TypeError(f"Unknown condition type: {type(condition).__name__}")
