"""Base exception shared by controlgen failure modes."""

from __future__ import annotations


class ControlGenError(RuntimeError):
    """Raised when a catalog cannot be produced."""


__all__ = ["ControlGenError"]
