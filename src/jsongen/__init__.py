"""jsongen package."""

from .config_io import (
    CONFIG_VERSION,
    DEFAULT_CONFIG,
    ConfigError,
    JsonConfig,
    load_config,
    resolve_config,
)
from .context import JsonContext
from .escape import escape_string, quote_string
from .json_write import dumps, emit_value, write_json
from .kvpair import KeyValuePairs
from .nesting import Frame, FrameKind, NestingTracker, WellFormednessError
from .scalars import format_float, format_integer
from .sink import Sink, StreamSink, StringSink

__all__ = [
    "JsonContext",
    "WellFormednessError",
    "NestingTracker",
    "Frame",
    "FrameKind",
    "escape_string",
    "quote_string",
    "format_integer",
    "format_float",
    "Sink",
    "StringSink",
    "StreamSink",
    "KeyValuePairs",
    "dumps",
    "emit_value",
    "write_json",
    "ConfigError",
    "JsonConfig",
    "DEFAULT_CONFIG",
    "CONFIG_VERSION",
    "load_config",
    "resolve_config",
]
