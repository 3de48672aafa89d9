"""Deterministic, key-sorted rendering of nested literal structures."""

from __future__ import annotations

import json
import math
from typing import Any, Mapping, Sequence

from .errors import ControlGenError

_INDENT = "    "


class SerializationError(ControlGenError):
    """Raised when a value cannot be rendered as a literal."""


def sorted_print(value: Any, indent: int = 0) -> str:
    """Render ``value`` with sorted mapping keys and sorted sequence elements.

    Output depends only on the logical content of ``value``: mapping keys are
    ordered lexicographically and sequence elements are ordered by their own
    rendered text, so insertion order never reaches the output.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _print_number(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, Mapping):
        return _print_mapping(value, indent)
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return _print_sequence(value, indent)
    raise SerializationError(f"sorted_print: unknown type: {type(value).__name__}")


def render_assignment(variable: str, value: Any) -> str:
    """Return ``var <variable> = <literal>;`` for the given value."""
    return f"var {variable} = {sorted_print(value)};"


def _print_number(value: float) -> str:
    if not math.isfinite(value):
        raise SerializationError(f"sorted_print: non-finite number: {value!r}")
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _print_sequence(items: Sequence[Any], indent: int) -> str:
    if not items:
        return "[]"
    inner = indent + 1
    rendered = sorted(sorted_print(item, inner) for item in items)
    lines = [f"{_INDENT * inner}{text}" for text in rendered]
    return "[\n" + ",\n".join(lines) + "\n" + _INDENT * indent + "]"


def _print_mapping(mapping: Mapping[Any, Any], indent: int) -> str:
    if not mapping:
        return "{}"
    for key in mapping:
        if not isinstance(key, str):
            raise SerializationError(
                f"sorted_print: mapping keys must be strings, got {type(key).__name__}"
            )
    inner = indent + 1
    lines = []
    for key in sorted(mapping):
        lines.append(f"{_INDENT * inner}{key}: {sorted_print(mapping[key], inner)}")
    return "{\n" + ",\n".join(lines) + "\n" + _INDENT * indent + "}"


__all__ = ["SerializationError", "render_assignment", "sorted_print"]
