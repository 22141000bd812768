"""argparse bridge.

Copies values from an InputSource into parser defaults before parsing, using
each flag's long option as the key (``--server-timeout`` -> ``server-timeout``),
then its ``dest``.
Values given on the command line still win over the installed defaults.
"""

from __future__ import annotations

import argparse
import logging
import re
from datetime import timedelta
from typing import Any, Mapping, Optional

from inputsource.core.source import InputSource

_LOGGER = logging.getLogger(__name__)

# accessor kind -> InputSource method
ACCESSORS: dict[str, str] = {
    "int": "get_int",
    "duration": "get_duration",
    "float": "get_float",
    "string": "get_string",
    "string_list": "get_string_list",
    "int_list": "get_int_list",
    "generic": "get_generic",
    "bool": "get_bool",
    "bool_true": "get_bool_true",
}

_DURATION_UNITS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)(ns|us|µs|ms|s|m|h)")


def parse_duration(text: str) -> timedelta:
    """
    argparse ``type=`` for durations: ``"90"`` (seconds), ``"1.5s"``,
    ``"250ms"``, ``"1h30m"``.
    """
    raw = text.strip()
    try:
        return timedelta(seconds=float(raw))
    except (ValueError, OverflowError):
        pass

    seconds = 0.0
    pos = 0
    for part in _DURATION_PART.finditer(raw):
        if part.start() != pos:
            break
        seconds += float(part.group(1)) * _DURATION_UNITS[part.group(2)]
        pos = part.end()

    if pos == 0 or pos != len(raw):
        raise argparse.ArgumentTypeError(f"invalid duration: {text!r}")
    try:
        return timedelta(seconds=seconds)
    except OverflowError as exc:
        raise argparse.ArgumentTypeError(f"invalid duration: {text!r}") from exc


def flag_key(action: argparse.Action) -> Optional[str]:
    """Return the input source key for ``action``, or None if it has no long option."""
    for option in action.option_strings:
        if option.startswith("--"):
            return option[2:]
    return None


def infer_kind(action: argparse.Action) -> Optional[str]:
    if isinstance(action, (argparse._HelpAction, argparse._VersionAction)):
        return None
    if isinstance(action, argparse._StoreTrueAction):
        return "bool"
    if isinstance(action, argparse._StoreFalseAction):
        return "bool_true"
    if isinstance(action, argparse.BooleanOptionalAction):
        return "bool_true" if action.default is True else "bool"

    if isinstance(action, argparse._AppendAction):
        if action.type is int:
            return "int_list"
        if action.type in (None, str):
            return "string_list"
        return None

    if isinstance(action, argparse._StoreAction) and action.nargs is None:
        if action.type is int:
            return "int"
        if action.type is float:
            return "float"
        if action.type is parse_duration:
            return "duration"
        if action.type in (None, str):
            return "string"
    return None


_UNSET = object()


def dest_key(action: argparse.Action) -> str:
    return action.dest.replace("_", "-")


def _read_default(source: InputSource, action: argparse.Action, key: str, kind: str) -> Any:
    accessor = getattr(source, ACCESSORS[kind])
    fallback = dest_key(action)

    if isinstance(action, argparse._StoreFalseAction) and kind == "bool_true":
        # "--no-cache" stores into "cache"; a "no-cache" field holds the inverse
        if source.contains(fallback):
            return accessor(fallback)
        if key != fallback and source.contains(key):
            return not source.get_bool(key)
        return _UNSET

    for candidate in dict.fromkeys((key, fallback)):
        if source.contains(candidate):
            return accessor(candidate)
    return _UNSET


def apply_input_source(
    parser: argparse.ArgumentParser,
    source: InputSource,
    kinds: Optional[Mapping[str, str]] = None,
) -> dict[str, Any]:
    """
    Install values from ``source`` as defaults on ``parser``.

    Each flag is looked up by its long option first, then by its ``dest``
    (``--tag`` with ``dest="tags"`` also tries ``tags``).

    ``kinds`` maps an action ``dest`` to an accessor kind (see ACCESSORS) for
    flags whose kind cannot be inferred, e.g. generic flags. Keys the source
    does not contain are left alone. ValueConversionError propagates.

    Note that for ``append`` flags argparse appends command-line values to
    the installed default list.
    """
    overrides = dict(kinds or {})
    unknown = sorted(set(overrides.values()) - set(ACCESSORS))
    if unknown:
        raise ValueError(f"unknown flag kind(s): {', '.join(unknown)}")

    applied: dict[str, Any] = {}
    for action in parser._actions:
        key = flag_key(action)
        if key is None:
            continue
        kind = overrides.get(action.dest) or infer_kind(action)
        if kind is None:
            continue

        value = _read_default(source, action, key, kind)
        if value is not _UNSET:
            applied[action.dest] = value

    if applied:
        parser.set_defaults(**applied)

    _LOGGER.debug(
        "input_source_defaults_applied",
        extra={
            "event": "input_source_defaults_applied",
            "prog": parser.prog,
            "dests": sorted(applied),
        },
    )
    return applied
