"""Core data models shared across controlgen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from .constants import EVENT_MARKER


@dataclass
class Parameter:
    """A single parameter of a call signature."""

    name: str
    type: "TypeDescriptor"
    optional: bool = False


@dataclass
class CallSignature:
    """Call signature of a function-shaped declaration."""

    parameters: List[Parameter] = field(default_factory=list)
    return_type: Optional["TypeDescriptor"] = None


@dataclass
class Property:
    """Named member of an object declaration."""

    name: str
    type: "TypeDescriptor"
    optional: bool = False


@dataclass
class TypeDescriptor:
    """Tagged description of a declaration or type expression.

    ``kind`` is one of ``builtin``, ``reference``, ``enum``, ``object`` or
    ``type-parameter``; any other tag marks a shape outside the modelled
    vocabulary. ``name`` holds the primitive name for builtins, the written
    name for references and type parameters, and the qualified name for
    enums and named object declarations. ``role`` is only set for objects.
    """

    kind: str
    name: Optional[str] = None
    role: Optional[str] = None
    properties: Dict[str, Property] = field(default_factory=dict)
    calls: List[CallSignature] = field(default_factory=list)
    type_arguments: List["TypeDescriptor"] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain nested structure suitable for diagnostic dumps."""
        data: Dict[str, Any] = {"kind": self.kind}
        if self.name is not None:
            data["name"] = self.name
        if self.role is not None:
            data["role"] = self.role
        if self.properties:
            data["properties"] = {
                name: prop.type.to_dict() for name, prop in self.properties.items()
            }
        if self.calls:
            data["calls"] = [_call_to_dict(call) for call in self.calls]
        if self.type_arguments:
            data["typeArguments"] = [arg.to_dict() for arg in self.type_arguments]
        return data


@dataclass
class TypeEnvironment:
    """Declaration graph returned by a type environment provider."""

    env: Dict[str, TypeDescriptor] = field(default_factory=dict)
    enums: Dict[str, List[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class BuiltinOrReference:
    """Passthrough of a primitive or referenced type name."""

    type_name: str

    def to_literal(self) -> str:
        return self.type_name


@dataclass(frozen=True)
class EnumValues:
    """Short member names of an enumeration."""

    values: Tuple[str, ...]

    def to_literal(self) -> List[str]:
        return list(self.values)


@dataclass(frozen=True)
class EventSignature:
    """Callback of unspecified arity."""

    def to_literal(self) -> str:
        return EVENT_MARKER


PropertyMetadata = Union[BuiltinOrReference, EnumValues, EventSignature]
Catalog = Dict[str, Dict[str, PropertyMetadata]]


def _call_to_dict(call: CallSignature) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "parameters": [
            {"name": param.name, "optional": param.optional, "type": param.type.to_dict()}
            for param in call.parameters
        ]
    }
    if call.return_type is not None:
        data["returnType"] = call.return_type.to_dict()
    return data


__all__ = [
    "BuiltinOrReference",
    "CallSignature",
    "Catalog",
    "EnumValues",
    "EventSignature",
    "Parameter",
    "Property",
    "PropertyMetadata",
    "TypeDescriptor",
    "TypeEnvironment",
]
