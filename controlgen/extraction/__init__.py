"""Extraction of the control catalog from a declaration graph."""

from .catalog import CatalogAssembler, build_catalog, catalog_to_literal
from .classifier import ClassificationError, PropertyClassifier
from .enums import EnumResolutionError, StringEnumLookup, StringEnumOutcome, lookup_string_enum
from .events import EventNormalizer, UnknownEventsError
from .namespaces import Control, select_controls

__all__ = [
    "CatalogAssembler",
    "ClassificationError",
    "Control",
    "EnumResolutionError",
    "EventNormalizer",
    "PropertyClassifier",
    "StringEnumLookup",
    "StringEnumOutcome",
    "UnknownEventsError",
    "build_catalog",
    "catalog_to_literal",
    "lookup_string_enum",
    "select_controls",
]
