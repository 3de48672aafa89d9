"""Contract for type environment providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from ..errors import ControlGenError
from ..models import TypeEnvironment


class ProviderError(ControlGenError):
    """Raised when declaration sources cannot be turned into a type environment."""


@dataclass(frozen=True)
class SourceText:
    """Declaration text tagged with the identifier used in diagnostics."""

    identifier: str
    text: str


class TypeEnvironmentProvider(ABC):
    """Builds a declaration graph from an ordered list of sources."""

    @abstractmethod
    def load(self, sources: Sequence[SourceText]) -> TypeEnvironment:
        """Parse ``sources`` in order; earlier sources are visible to later ones."""
