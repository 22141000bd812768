"""
Dash-delimited key resolution over nested records.

A key like ``"db-conn-timeout"`` is tried against the current record as:
    1. "db-conn-timeout" -> field ``dbconntimeout``
    2. "db-conn"         -> record field ``db_conn``, continue with "timeout"
    3. "db"              -> record field ``db``, continue with "conn-timeout"
The longest prefix always wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from inputsource.core.records import FieldSpec, deref, field_table, is_record, normalize

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldMatch:
    value: Any
    field: FieldSpec
    path: tuple[str, ...]


def _prefix_cuts(key: str) -> Iterator[int]:
    # len(key), then the index of each earlier "-" from right to left
    i = len(key)
    while i != -1:
        yield i
        i = key.rfind("-", 0, i)


def _walk(root: Any, key: str) -> Optional[FieldMatch]:
    record = root
    remaining = key
    path: tuple[str, ...] = ()

    while True:
        table = field_table(type(record))
        for i in _prefix_cuts(remaining):
            spec = table.get(normalize(remaining[:i]))
            if spec is None:
                continue

            value = deref(spec.read(record))

            if i == len(remaining):
                # complete match, return regardless of type
                return FieldMatch(value=value, field=spec, path=path + (spec.name,))

            if is_record(value):
                record = value
                remaining = remaining[i + 1 :]
                path = path + (spec.name,)
                break
        else:
            return None


def lookup(root: Any, key: str) -> Optional[FieldMatch]:
    """Return the field matching ``key`` under ``root``, or None."""
    match = _walk(root, key)
    if match is None:
        _LOGGER.debug(
            "input_source_key_missed",
            extra={"event": "input_source_key_missed", "key": key},
        )
        return None

    _LOGGER.debug(
        "input_source_key_resolved",
        extra={
            "event": "input_source_key_resolved",
            "key": key,
            "path": ".".join(match.path),
        },
    )
    return match


def resolve(root: Any, key: str) -> tuple[Any, bool]:
    """Resolve ``key`` against ``root``; returns ``(value, found)``."""
    match = lookup(root, key)
    if match is None:
        return None, False
    return match.value, True
