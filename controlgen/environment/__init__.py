"""Type environment providers and their shared contract."""

from .base import ProviderError, SourceText, TypeEnvironmentProvider
from .tree_sitter import TreeSitterProvider

__all__ = [
    "ProviderError",
    "SourceText",
    "TreeSitterProvider",
    "TypeEnvironmentProvider",
]
