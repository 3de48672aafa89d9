"""Classification of control properties into catalog metadata."""

from __future__ import annotations

from typing import Optional, Tuple

from .enums import lookup_string_enum, resolve_direct_enum
from .events import EventNormalizer, is_event_name
from ..config import ControlGenConfig
from ..constants import BUILTIN_TYPE_NAMES
from ..errors import ControlGenError
from ..logging import get_logger
from ..models import (
    BuiltinOrReference,
    EnumValues,
    EventSignature,
    Property,
    PropertyMetadata,
    TypeDescriptor,
    TypeEnvironment,
)
from ..printer import sorted_print

Classified = Tuple[str, PropertyMetadata]


class ClassificationError(ControlGenError):
    """Raised when a property type falls outside the modelled vocabulary."""

    def __init__(self, namespace: str, property_name: str, descriptor: TypeDescriptor) -> None:
        self.namespace = namespace
        self.property_name = property_name
        self.descriptor = descriptor
        self.dump = sorted_print(descriptor.to_dict())
        super().__init__(
            f"Cannot classify {namespace}.{property_name}: unsupported type shape\n{self.dump}"
        )


def is_builtin(descriptor: TypeDescriptor) -> bool:
    return descriptor.kind == "builtin" and descriptor.name in BUILTIN_TYPE_NAMES


def is_reference(descriptor: TypeDescriptor) -> bool:
    return descriptor.kind == "reference"


def is_enum(descriptor: TypeDescriptor) -> bool:
    return descriptor.kind == "enum"


def is_function_shaped(descriptor: TypeDescriptor) -> bool:
    return descriptor.kind == "object" and bool(descriptor.calls)


class PropertyClassifier:
    """Maps a control property to its output name and metadata.

    ``classify`` returns ``None`` for properties left out of the catalog:
    plain methods, unmapped events (recorded on the event normalizer) and
    DOM element plumbing such as ``element`` or ``inputElement``.
    """

    def __init__(
        self,
        environment: TypeEnvironment,
        config: ControlGenConfig,
        events: EventNormalizer,
    ) -> None:
        self._environment = environment
        self._config = config
        self._events = events
        self.logger = get_logger("classifier")

    def classify(self, namespace: str, prop: Property) -> Optional[Classified]:
        descriptor = prop.type
        if is_function_shaped(descriptor):
            return self._classify_function(prop.name)
        if is_enum(descriptor):
            return prop.name, resolve_direct_enum(self._environment.enums, descriptor)
        if is_builtin(descriptor) or is_reference(descriptor):
            return self._classify_data(namespace, prop)
        raise ClassificationError(namespace, prop.name, descriptor)

    def _classify_function(self, name: str) -> Optional[Classified]:
        if not is_event_name(name):
            return None
        canonical = self._events.normalize(name)
        if canonical is None:
            return None
        return canonical, EventSignature()

    def _classify_data(self, namespace: str, prop: Property) -> Optional[Classified]:
        descriptor = prop.type
        if prop.name.lower().endswith(self._config.excluded_suffix):
            return None
        if descriptor.kind == "builtin" and descriptor.name == "string":
            lookup = lookup_string_enum(
                self._environment.env, namespace, prop.name, self._config.namespace_root
            )
            if lookup.resolved:
                return prop.name, EnumValues(lookup.values)
            self.logger.debug(
                "%s.%s stays a string (%s)", namespace, prop.name, lookup.outcome.value
            )
        return prop.name, BuiltinOrReference(descriptor.name or "")


__all__ = [
    "ClassificationError",
    "PropertyClassifier",
    "is_builtin",
    "is_enum",
    "is_function_shaped",
    "is_reference",
]
