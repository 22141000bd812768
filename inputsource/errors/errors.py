"""
Exceptions raised by the input source.

Exception hierarchy:
- InputSourceError (base)
  - RecordShapeError: constructor argument is not a record
  - KeyNotFoundError: strict-mode lookup found no matching field
  - ValueConversionError: field found but of the wrong dynamic type
"""

from __future__ import annotations

from typing import Any, Optional


class InputSourceError(Exception):
    """Base exception for all input source errors."""

    def __init__(
        self,
        message: str,
        *,
        key: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.key = key
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        parts = [self.args[0] if self.args else ""]
        if self.details:
            parts.append(f"[details={self.details}]")
        return " ".join(parts)


class RecordShapeError(InputSourceError, TypeError):
    """Raised when the configuration value is not a record."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            "inputsource: structure is not a record",
            details={"type": type(value).__name__},
        )


class KeyNotFoundError(InputSourceError, KeyError):
    """Raised in strict mode when no field matches the key."""

    def __init__(self, key: str) -> None:
        super().__init__(f"could not find key: {key}", key=key)


class ValueConversionError(InputSourceError, ValueError):
    """
    Raised when a resolved value cannot be viewed as the requested type.

    ``default`` holds the typed zero value the accessor would have returned,
    so callers can fall back to it.
    """

    def __init__(self, key: str, value: Any, expected: str, default: Any = None) -> None:
        self.value = value
        self.expected = expected
        self.actual = type(value).__name__
        self.default = default
        super().__init__(
            f"could not convert {self.actual}{{{value!r}}} to {expected} for {key}",
            key=key,
        )
