"""Public windowing error taxonomy."""

from __future__ import annotations


class WindowingError(Exception):
    """Base class for windowing engine errors."""


class InvalidViewportConfigError(WindowingError, ValueError):
    """Raised when geometry, overscan or offsets violate the caller contract."""

    def __init__(self, field: str, value: object, constraint: str) -> None:
        self.field = field
        self.value = value
        self.constraint = constraint
        super().__init__(f"{field} must be {constraint}, got {value!r}")


__all__ = ["InvalidViewportConfigError", "WindowingError"]
