"""Resolution of enumeration values for control properties.

Two strategies exist. Direct enums carry a qualified enum name that is looked
up in the environment's enum map. String enums are plain ``string`` properties
whose legal values live on a static helper of the control: the property
``panePlacement`` of ``WinJS.UI.SplitView`` takes its values from the members
of ``WinJS.UI.SplitView.PanePlacement``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Mapping, Tuple

from ..errors import ControlGenError
from ..models import EnumValues, TypeDescriptor


class EnumResolutionError(ControlGenError):
    """Raised when an enum type names an enum the environment does not declare."""


class StringEnumOutcome(enum.Enum):
    """Result of applying the static-helper naming convention."""

    RESOLVED = "resolved"
    NOT_A_CONTROL = "not-a-control"
    NO_HELPER = "no-helper"
    NO_MEMBER = "no-member"
    MEMBER_NOT_OBJECT = "member-not-object"


@dataclass(frozen=True)
class StringEnumLookup:
    outcome: StringEnumOutcome
    values: Tuple[str, ...] = ()

    @property
    def resolved(self) -> bool:
        return self.outcome is StringEnumOutcome.RESOLVED


def short_name(qualified: str) -> str:
    return qualified.rsplit(".", 1)[-1]


def resolve_direct_enum(enums: Mapping[str, List[str]], descriptor: TypeDescriptor) -> EnumValues:
    """Return the short member names of the enum ``descriptor`` refers to."""
    members = enums.get(descriptor.name or "")
    if members is None:
        raise EnumResolutionError(f"Unknown enum: {descriptor.name}")
    return EnumValues(tuple(short_name(member) for member in members))


def helper_member_name(property_name: str) -> str:
    """Return the static helper member for ``property_name`` (first letter upper-cased)."""
    return property_name[:1].upper() + property_name[1:]


def lookup_string_enum(
    env: Mapping[str, TypeDescriptor],
    namespace: str,
    property_name: str,
    namespace_root: str,
) -> StringEnumLookup:
    """Apply the static-helper convention for a string property of ``namespace``."""
    prefix = f"{namespace_root}."
    control_name = namespace[len(prefix):]
    if not namespace.startswith(prefix) or not control_name or "." in control_name:
        return StringEnumLookup(StringEnumOutcome.NOT_A_CONTROL)

    root_module = env.get(f"module:{namespace_root}")
    helper = root_module.properties.get(control_name) if root_module is not None else None
    if helper is None:
        return StringEnumLookup(StringEnumOutcome.NO_HELPER)

    member = helper.type.properties.get(helper_member_name(property_name))
    if member is None:
        return StringEnumLookup(StringEnumOutcome.NO_MEMBER)

    if member.type.kind != "object":
        return StringEnumLookup(StringEnumOutcome.MEMBER_NOT_OBJECT)
    # An object member with no properties resolves to an empty value set.
    return StringEnumLookup(StringEnumOutcome.RESOLVED, tuple(member.type.properties))


__all__ = [
    "EnumResolutionError",
    "StringEnumLookup",
    "StringEnumOutcome",
    "helper_member_name",
    "lookup_string_enum",
    "resolve_direct_enum",
    "short_name",
]
