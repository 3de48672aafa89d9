"""Assembly of the control catalog from a type environment."""

from __future__ import annotations

from typing import Any, Dict, Optional

from .classifier import PropertyClassifier
from .events import EventNormalizer
from .namespaces import select_controls
from ..config import ControlGenConfig
from ..logging import get_logger
from ..models import Catalog, PropertyMetadata, TypeEnvironment


class CatalogAssembler:
    """Runs namespace filtering and property classification over one environment."""

    def __init__(self, config: Optional[ControlGenConfig] = None) -> None:
        self.config = config or ControlGenConfig()
        self.logger = get_logger("catalog")

    def assemble(self, environment: TypeEnvironment) -> Catalog:
        """Return the catalog, or raise once every unknown event name is known."""
        events = EventNormalizer(self.config.event_capitalization)
        classifier = PropertyClassifier(environment, self.config, events)

        catalog: Catalog = {}
        for control in select_controls(environment.env, self.config):
            if control.name in catalog:
                self.logger.warning(
                    "Control name %s is declared twice; keeping %s", control.name, control.namespace
                )
            properties: Dict[str, PropertyMetadata] = {}
            for prop in control.declaration.properties.values():
                classified = classifier.classify(control.namespace, prop)
                if classified is not None:
                    name, metadata = classified
                    properties[name] = metadata
            catalog[control.name] = properties

        events.validate()
        self.logger.info("Extracted %d controls", len(catalog))
        return catalog


def catalog_to_literal(catalog: Catalog) -> Dict[str, Dict[str, Any]]:
    """Convert catalog metadata into plain values for the printer."""
    return {
        control: {name: metadata.to_literal() for name, metadata in properties.items()}
        for control, properties in catalog.items()
    }


def build_catalog(
    environment: TypeEnvironment, config: Optional[ControlGenConfig] = None
) -> Catalog:
    return CatalogAssembler(config).assemble(environment)


__all__ = ["CatalogAssembler", "build_catalog", "catalog_to_literal"]
