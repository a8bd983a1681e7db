"""Entity loader - builds entity types from YAML/JSON declaration files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..config import RepresenterConfig
from ..exposure.errors import InvalidExposureDeclaration
from .catalog import EntityCatalog
from .entity import Entity
from .models import EntityDeclaration

logger = logging.getLogger(__name__)


class EntityLoader:
    """
    Loads entity declarations and registers the resulting entity types.

    File format:
    ```yaml
    Status:
      exposures:
        - attributes: [text, created_at]

    User:
      exposures:
        - attributes: [first_name, last_name]
        - attributes: latest_status
          as: status
          using: Status
          unless: {collection: true}
        - attributes: email
          if: {type: full}
    ```

    ``using`` may name any entity in the same file, declared before or
    after, or one already present in the target catalog. Conditions in
    files are always key-equality mappings.
    """

    def __init__(
        self,
        catalog: EntityCatalog | None = None,
        config: RepresenterConfig | None = None,
    ):
        self.catalog = catalog if catalog is not None else EntityCatalog()
        self.config = config

    def load_file(self, path: str | Path) -> EntityCatalog:
        """Load declarations from a YAML or JSON file."""
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Entity declaration file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            if path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                import json
                data = json.load(f)

        logger.info(f"Loading entity declarations: {path}")
        if data is not None and not isinstance(data, dict):
            raise InvalidExposureDeclaration(
                f"Entity declaration file {path} must contain a mapping of "
                f"entity name -> declaration, got {type(data).__name__}"
            )
        return self.load_dict(data or {})

    def load_dict(self, data: dict[str, Any]) -> EntityCatalog:
        """
        Load declarations from a dictionary of entity name -> declaration.

        Nothing is added to the catalog unless every declaration loads.
        """
        if not isinstance(data, dict):
            raise InvalidExposureDeclaration(
                f"Entity declarations must be a mapping, got {type(data).__name__}"
            )

        declarations: dict[str, EntityDeclaration] = {}
        for name, entity_data in data.items():
            if name in self.catalog:
                raise ValueError(f"Entity '{name}' already registered")
            try:
                declarations[name] = EntityDeclaration.model_validate(entity_data or {})
            except ValidationError as e:
                raise InvalidExposureDeclaration(
                    f"Invalid declaration for entity '{name}': {e}"
                ) from e

        # Create every type before registering exposures so that
        # ``using`` can refer forward
        defined = {name: self._define(name) for name in declarations}

        for name, declaration in declarations.items():
            entity_type = defined[name]
            for exposure in declaration.exposures:
                options = exposure.to_options()
                if exposure.using is not None:
                    delegate = defined.get(exposure.using) or self.catalog.get(exposure.using)
                    if delegate is None:
                        raise InvalidExposureDeclaration(
                            f"Entity '{name}' uses unknown entity '{exposure.using}'"
                        )
                    options["using"] = delegate
                entity_type.exposures().register(exposure.attributes, options)
            logger.debug(f"Loaded entity: {name} ({len(entity_type.exposures())} exposures)")

        self.catalog.register_many(defined)
        logger.info(f"Loaded {len(defined)} entity types")
        return self.catalog

    def _define(self, name: str) -> type[Entity]:
        namespace: dict[str, Any] = {"__module__": __name__}
        if self.config is not None:
            namespace["config"] = self.config
        return type(name, (Entity,), namespace)


def load_entities(
    source: str | Path | dict,
    catalog: EntityCatalog | None = None,
    config: RepresenterConfig | None = None,
) -> EntityCatalog:
    """
    Convenience function to load entity declarations.

    Args:
        source: File path or dictionary
        catalog: Catalog to register into (a new one by default)
        config: Config assigned to every loaded entity type

    Returns:
        EntityCatalog containing the loaded entity types
    """
    loader = EntityLoader(catalog, config)

    if isinstance(source, dict):
        return loader.load_dict(source)
    return loader.load_file(source)
