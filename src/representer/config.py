"""Configuration for entity representation."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class RepresenterConfig:
    """Behaviour switches shared by entity types.

    Entity types read this as the ``config`` class attribute; a subclass
    may assign its own instance to override the default.
    """

    # Delegated (``using``) exposures are represented with empty options
    # unless this is set, in which case they see the parent's merge context.
    inherit_delegate_options: bool = False

    # Freeze an entity type's exposures the first time it is represented.
    freeze_on_represent: bool = True

    @classmethod
    def from_dict(cls, data: dict) -> RepresenterConfig:
        """Create config from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def from_yaml(cls, path: str) -> RepresenterConfig:
        """Load config from YAML file."""
        import yaml
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_json(cls, path: str) -> RepresenterConfig:
        """Load config from JSON file."""
        import json
        with open(path, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)


DEFAULT_CONFIG = RepresenterConfig()
