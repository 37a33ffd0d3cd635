"""Serialize plain Python values through a JsonContext."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from jsongen.config_io import ConfigSource, JsonConfig, resolve_config
from jsongen.context import JsonContext
from jsongen.kvpair import KeyValuePairs
from jsongen.nesting import WellFormednessError
from jsongen.scalars import MAX_FLOAT_PRECISION
from jsongen.sink import StringSink

# Whole values are expected to parse back unchanged.
ROUND_TRIP_CONFIG = JsonConfig(float_precision=MAX_FLOAT_PRECISION)


def emit_value(ctx: JsonContext, obj: Any, *, sort_keys: bool = False) -> None:
    """Emit ``obj`` as one JSON value at the context's current position."""
    if obj is None:
        ctx.add_null()
    elif isinstance(obj, bool):
        ctx.add_bool(obj)
    elif isinstance(obj, int):
        ctx.add_integer(obj)
    elif isinstance(obj, float):
        ctx.add_float(obj)
    elif isinstance(obj, str):
        ctx.add_string(obj)
    elif isinstance(obj, KeyValuePairs):
        ctx.add_key_value_pairs(obj)
    elif isinstance(obj, Mapping):
        keys = list(obj.keys())
        for key in keys:
            if not isinstance(key, str):
                raise TypeError(f"object keys must be str, got {type(key)!r}")
        if sort_keys:
            keys.sort()
        ctx.start_object()
        for key in keys:
            ctx.add_key(key)
            emit_value(ctx, obj[key], sort_keys=sort_keys)
        ctx.end()
    elif isinstance(obj, (list, tuple)):
        ctx.start_array()
        for item in obj:
            emit_value(ctx, item, sort_keys=sort_keys)
        ctx.end()
    else:
        raise TypeError(f"unsupported type for JSON output: {type(obj)!r}")


def dumps(obj: Any, *, config: ConfigSource = None, sort_keys: bool = False) -> str:
    """
    Return compact JSON text for ``obj``.

    Without ``config`` floats keep 17 significant digits so the text
    parses back to the same value.
    """
    sink = StringSink()
    ctx = JsonContext(sink, resolve_config(config, ROUND_TRIP_CONFIG))
    emit_value(ctx, obj, sort_keys=sort_keys)
    if ctx.current_level != 0:
        raise WellFormednessError(f"document left open at level {ctx.current_level}")
    return sink.getvalue()


def write_json(
    path: str | Path,
    obj: Any,
    *,
    config: ConfigSource = None,
    sort_keys: bool = False,
) -> None:
    """Write compact UTF-8 JSON for ``obj`` to ``path`` (no trailing newline).

    The text is rendered in full before ``path`` is touched, so a failure
    leaves an existing file as it was.
    """
    text = dumps(obj, config=config, sort_keys=sort_keys)
    Path(path).write_text(text, encoding="utf-8", newline="\n")
