"""
Typed configuration lookup for CLI flag defaults.

Resolves dash-delimited flag names (``"server-timeout"``) against a possibly
nested configuration record, matching field names case-insensitively and
ignoring separators, and returns typed values.

Usage:
    from inputsource import InputSource

    source = InputSource(config)
    timeout = source.get_duration("server-timeout")
"""

from inputsource.cli.flags import apply_input_source, parse_duration
from inputsource.core.resolver import FieldMatch, lookup, resolve
from inputsource.core.source import InputSource
from inputsource.errors.errors import (
    InputSourceError,
    KeyNotFoundError,
    RecordShapeError,
    ValueConversionError,
)
from inputsource.ports.generic_value import GenericValue, GenericValueProducer
from inputsource.ports.input_source import InputSourceContext

__all__ = [
    # Main entry point
    "InputSource",
    "apply_input_source",
    "parse_duration",
    # Resolution
    "FieldMatch",
    "lookup",
    "resolve",
    # Ports
    "InputSourceContext",
    "GenericValue",
    "GenericValueProducer",
    # Errors
    "InputSourceError",
    "KeyNotFoundError",
    "RecordShapeError",
    "ValueConversionError",
]
