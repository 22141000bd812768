"""
Typed access to a configuration record by flag name.

InputSource implements the InputSourceContext port: every accessor resolves the
key through the resolver and then checks the dynamic type of the value. A key
that does not resolve gives the accessor's default; a value of the wrong type
raises ValueConversionError carrying that default.
"""

from __future__ import annotations

import logging
import typing
from datetime import timedelta
from ipaddress import IPv4Address, IPv6Address
from typing import Any, Callable, Optional

from pydantic import IPvAnyAddress

from inputsource.core.records import deref, is_record
from inputsource.core.resolver import FieldMatch, lookup
from inputsource.errors.errors import KeyNotFoundError, RecordShapeError, ValueConversionError
from inputsource.ports.generic_value import GenericValue, GenericValueProducer
from inputsource.ports.input_source import InputSourceContext

_LOGGER = logging.getLogger(__name__)

_IP_TYPES = (IPv4Address, IPv6Address)
_IP_TYPE_NAMES = ("IPv4Address", "IPv6Address", "IPvAnyAddress")

_MISSING = object()


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _declares_ip_address(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return any(name in annotation for name in _IP_TYPE_NAMES)
    if annotation in _IP_TYPES or annotation is IPvAnyAddress:
        return True
    return any(_declares_ip_address(arg) for arg in typing.get_args(annotation))


class InputSource(InputSourceContext):
    """
    Read-only typed view over a configuration record.

    ``data`` must be a record (dataclass, pydantic model or NamedTuple), or a
    ``weakref.ref`` to one. With ``strict=True`` an unresolvable key raises
    KeyNotFoundError instead of returning the accessor's default.
    """

    def __init__(self, data: Any, *, strict: bool = False) -> None:
        value = deref(data)
        if not is_record(value):
            raise RecordShapeError(value)

        self._data = value
        self._strict = strict

        _LOGGER.debug(
            "input_source_created",
            extra={
                "event": "input_source_created",
                "record_type": type(value).__name__,
                "strict": strict,
            },
        )

    @property
    def record(self) -> Any:
        return self._data

    @property
    def strict(self) -> bool:
        return self._strict

    def __repr__(self) -> str:
        return f"InputSource({type(self._data).__name__}, strict={self._strict})"

    # --- resolution ---------------------------------

    def _match(self, key: str) -> Optional[FieldMatch]:
        match = lookup(self._data, key)
        if match is None and self._strict:
            raise KeyNotFoundError(key)
        return match

    def contains(self, key: str) -> bool:
        """Return True when ``key`` resolves to a field. Never raises."""
        return lookup(self._data, key) is not None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the raw resolved value without any type check."""
        match = self._match(key)
        if match is None:
            return default
        return match.value

    def _typed(
        self,
        key: str,
        expected: str,
        check: Callable[[Any], bool],
        absent: Any,
        mismatch: Any = _MISSING,
    ) -> Any:
        match = self._match(key)
        if match is None:
            return absent

        value = match.value
        if check(value):
            return value

        raise ValueConversionError(
            key, value, expected, default=absent if mismatch is _MISSING else mismatch
        )

    # --- accessors ----------------------------------

    def get_int(self, key: str) -> int:
        return self._typed(key, "int", _is_int, 0)

    def get_duration(self, key: str) -> timedelta:
        return self._typed(key, "timedelta", lambda v: isinstance(v, timedelta), timedelta(0))

    def get_float(self, key: str) -> float:
        return self._typed(key, "float", lambda v: isinstance(v, float), 0.0)

    def get_string(self, key: str) -> str:
        """
        Strings are returned as-is. IP addresses are returned in their
        canonical text form, and an unset (None) field declared as an IP
        address reads as "".
        """
        match = self._match(key)
        if match is None:
            return ""

        value = match.value
        if isinstance(value, str):
            return value
        if isinstance(value, _IP_TYPES):
            return str(value)
        if value is None and _declares_ip_address(match.field.annotation):
            return ""

        raise ValueConversionError(key, value, "str", default="")

    def get_string_list(self, key: str) -> list[str]:
        value = self._typed(
            key,
            "list[str]",
            lambda v: isinstance(v, list) and all(isinstance(item, str) for item in v),
            [],
            mismatch=None,
        )
        return list(value)

    def get_int_list(self, key: str) -> list[int]:
        value = self._typed(
            key,
            "list[int]",
            lambda v: isinstance(v, list) and all(_is_int(item) for item in v),
            [],
            mismatch=None,
        )
        return list(value)

    def get_generic(self, key: str) -> Optional[GenericValue]:
        match = self._match(key)
        if match is None:
            return None

        value = match.value
        if isinstance(value, GenericValue):
            return value
        if isinstance(value, GenericValueProducer):
            return value.generic()

        raise ValueConversionError(key, value, "GenericValue", default=None)

    def get_bool(self, key: str) -> bool:
        return self._typed(key, "bool", lambda v: isinstance(v, bool), False)

    def get_bool_true(self, key: str) -> bool:
        return self._typed(key, "bool (default true)", lambda v: isinstance(v, bool), True)
