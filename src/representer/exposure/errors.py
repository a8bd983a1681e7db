"""Exceptions raised by exposure declaration and resolution."""

from __future__ import annotations


class RepresenterError(Exception):
    """Base class for representer errors."""
    pass


class InvalidExposureDeclaration(RepresenterError, ValueError):
    """Raised when an exposure declaration is malformed."""
    pass


class MissingAttribute(RepresenterError, AttributeError):
    """Raised when a domain object cannot supply an exposed attribute."""

    def __init__(self, attribute: str, obj: object):
        self.attribute = attribute
        self.object_type = type(obj).__name__
        super().__init__(
            f"{self.object_type} object has no attribute '{attribute}'"
        )


class RegistryFrozenError(RepresenterError, RuntimeError):
    """Raised when registering on a registry that is already in use."""
    pass
