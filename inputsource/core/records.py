"""
Record shapes and per-type field descriptor tables.

A record is a dataclass instance, a pydantic model instance or a NamedTuple
instance. Field tables are built once per record type and map normalized
field names to the attribute that holds them.
"""

from __future__ import annotations

import dataclasses
import logging
import typing
import weakref
from dataclasses import dataclass
from functools import lru_cache
from operator import attrgetter
from typing import Any, Callable, Mapping

from pydantic import BaseModel

_LOGGER = logging.getLogger(__name__)

# characters ignored when comparing keys with field names
_SEPARATORS = ("-", "_")

# record types whose field tables are kept
FIELD_TABLE_CACHE_SIZE = 256


@dataclass(frozen=True)
class FieldSpec:
    name: str
    annotation: Any
    read: Callable[[Any], Any]


def normalize(name: str) -> str:
    """Lower-case ``name`` and drop separator characters."""
    for sep in _SEPARATORS:
        name = name.replace(sep, "")
    return name.lower()


def deref(value: Any) -> Any:
    """Remove one level of ``weakref.ref`` indirection."""
    if isinstance(value, weakref.ReferenceType):
        return value()
    return value


def is_record(value: Any) -> bool:
    if isinstance(value, type):
        return False
    if isinstance(value, BaseModel):
        return True
    if dataclasses.is_dataclass(value):
        return True
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def _declared_fields(cls: type) -> dict[str, Any]:
    if issubclass(cls, BaseModel):
        return {name: info.annotation for name, info in cls.model_fields.items()}

    try:
        hints = typing.get_type_hints(cls)
    except (NameError, TypeError):
        # unresolvable forward references; keep the raw annotations
        hints = dict(getattr(cls, "__annotations__", {}))

    if dataclasses.is_dataclass(cls):
        return {f.name: hints.get(f.name, f.type) for f in dataclasses.fields(cls)}
    return {name: hints.get(name, Any) for name in cls._fields}


@lru_cache(maxsize=FIELD_TABLE_CACHE_SIZE)
def field_table(cls: type) -> Mapping[str, FieldSpec]:
    """
    Build the normalized-name -> FieldSpec table for a record type.

    Private fields (leading underscore) are skipped. Names that normalize to
    the same value are ambiguous and left out of the table.
    """
    table: dict[str, FieldSpec] = {}
    ambiguous: set[str] = set()

    for name, annotation in _declared_fields(cls).items():
        if name.startswith("_"):
            continue
        norm = normalize(name)
        if norm in table or norm in ambiguous:
            table.pop(norm, None)
            ambiguous.add(norm)
            continue
        table[norm] = FieldSpec(name=name, annotation=annotation, read=attrgetter(name))

    if ambiguous:
        _LOGGER.debug(
            "input_source_ambiguous_fields",
            extra={
                "event": "input_source_ambiguous_fields",
                "record_type": cls.__name__,
                "names": sorted(ambiguous),
            },
        )
    return table
