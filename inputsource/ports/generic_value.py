"""GenericValue Port Interface.

Contract: custom flag values beyond the built-in scalar and list kinds. A value
is usable either when it is a GenericValue itself or when it can produce one.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class GenericValue(Protocol):
    def set(self, value: str) -> None:
        """Parse ``value`` from the command line into this flag value."""
        ...

    def __str__(self) -> str: ...


@runtime_checkable
class GenericValueProducer(Protocol):
    def generic(self) -> GenericValue: ...
