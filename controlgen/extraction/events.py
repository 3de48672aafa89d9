"""Canonical naming of event properties."""

from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Set

from ..constants import EVENT_PREFIX
from ..errors import ControlGenError


class UnknownEventsError(ControlGenError):
    """Raised after a run that met event properties missing from the capitalization table."""

    def __init__(self, event_names: Iterable[str]) -> None:
        self.event_names: List[str] = sorted(set(event_names))
        super().__init__(format_unknown_events(self.event_names))


def is_event_name(name: str) -> bool:
    return name.startswith(EVENT_PREFIX)


def format_unknown_events(event_names: Iterable[str]) -> str:
    """Return a diagnostic listing ``event_names`` as capitalization table entries."""
    lines = [
        "Unknown capitalization for the following events. "
        "Please update the event capitalization table to include these events:"
    ]
    lines.extend(f'  {name}: "{name}"' for name in sorted(event_names))
    return "\n".join(lines)


class EventNormalizer:
    """Renames event properties and remembers the names it could not map."""

    def __init__(self, capitalization: Mapping[str, str]) -> None:
        self._capitalization = capitalization
        self._unknown: Set[str] = set()

    def normalize(self, name: str) -> Optional[str]:
        key = name.lower()
        canonical = self._capitalization.get(key)
        if canonical is None:
            self._unknown.add(key)
        return canonical

    @property
    def unknown(self) -> List[str]:
        return sorted(self._unknown)

    def validate(self) -> None:
        """Raise ``UnknownEventsError`` listing every unmapped event seen so far."""
        if self._unknown:
            raise UnknownEventsError(self._unknown)


__all__ = ["EventNormalizer", "UnknownEventsError", "format_unknown_events", "is_event_name"]
