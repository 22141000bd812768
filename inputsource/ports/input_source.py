"""InputSourceContext Port Interface.

Contract: typed lookup of flag defaults by flag name. Absent keys give the
type's default value; type mismatches raise ValueConversionError.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Optional, Protocol

from inputsource.ports.generic_value import GenericValue


class InputSourceContext(Protocol):
    def get_int(self, key: str) -> int: ...

    def get_duration(self, key: str) -> timedelta: ...

    def get_float(self, key: str) -> float: ...

    def get_string(self, key: str) -> str: ...

    def get_string_list(self, key: str) -> list[str]: ...

    def get_int_list(self, key: str) -> list[int]: ...

    def get_generic(self, key: str) -> Optional[GenericValue]: ...

    def get_bool(self, key: str) -> bool: ...

    def get_bool_true(self, key: str) -> bool:
        """Like get_bool, but an absent key reads as True."""
        ...
