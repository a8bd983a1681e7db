"""Exposure declarations - what an entity type shows and when."""

from .errors import (
    InvalidExposureDeclaration,
    MissingAttribute,
    RegistryFrozenError,
    RepresenterError,
)
from .types import Accessor, Condition, Exposure, KeyEquals, Predicate, coerce_condition
from .conditions import ConditionEvaluator
from .registry import ExposureRegistry

__all__ = [
    # Types
    "Accessor",
    "Condition",
    "Exposure",
    "KeyEquals",
    "Predicate",
    "coerce_condition",
    # Evaluation and storage
    "ConditionEvaluator",
    "ExposureRegistry",
    # Errors
    "InvalidExposureDeclaration",
    "MissingAttribute",
    "RegistryFrozenError",
    "RepresenterError",
]
