"""Streaming JSON writer session."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterable, Iterator, Mapping, Optional, Union

from jsongen.config_io import DEFAULT_CONFIG, ConfigSource, resolve_config
from jsongen.escape import escape_string, quote_string
from jsongen.kvpair import KeyValuePairs
from jsongen.nesting import FrameKind, NestingTracker
from jsongen.scalars import NULL, format_bool, format_float, format_integer
from jsongen.sink import Sink

_OPENERS = {FrameKind.ARRAY: "[", FrameKind.OBJECT: "{", FrameKind.STRING: '"'}
_CLOSERS = {FrameKind.ARRAY: "]", FrameKind.OBJECT: "}", FrameKind.STRING: '"'}

PairSource = Union[KeyValuePairs, Mapping[str, str], Iterable[tuple[str, str]]]


class JsonContext:
    """
    Write one JSON serialization into ``sink``, token by token.

    The context borrows the sink; it only ever appends to it. Nesting is
    validated as calls arrive and ``WellFormednessError`` is raised at the
    first call that would break the document. ``current_level`` is 0 once
    every opened container has been closed.
    """

    def __init__(self, sink: Sink, config: ConfigSource = None) -> None:
        self.sink = sink
        self.config = resolve_config(config, DEFAULT_CONFIG)
        self._tracker = NestingTracker(max_nesting=self.config.max_nesting)

    @property
    def current_level(self) -> int:
        return self._tracker.current_level

    def _add_value_text(self, text: str) -> None:
        sep = self._tracker.begin_value()
        self.sink.append(sep + text)

    def add_raw(self, text: str) -> None:
        """Add an already rendered JSON value as is."""
        self._add_value_text(text)

    def add_null(self) -> None:
        self._add_value_text(NULL)

    def add_bool(self, value: bool) -> None:
        self._add_value_text(format_bool(value))

    def add_integer(self, value: int) -> None:
        self._add_value_text(format_integer(value))

    def add_float(self, value: float, precision: int | None = None) -> None:
        if precision is None:
            precision = self.config.float_precision
        self._add_value_text(format_float(value, precision))

    def add_string(self, text: str) -> None:
        self._add_value_text(quote_string(text))

    def _start(self, kind: FrameKind) -> None:
        sep = self._tracker.push(kind)
        self.sink.append(sep + _OPENERS[kind])

    def start_array(self) -> None:
        self._start(FrameKind.ARRAY)

    def start_object(self) -> None:
        self._start(FrameKind.OBJECT)

    def start_string(self) -> None:
        """Open a string value whose text is added by ``append_string``."""
        self._start(FrameKind.STRING)

    def append_string(self, text: str) -> None:
        self._tracker.begin_string_chunk()
        self.sink.append(escape_string(text))

    def end(self) -> None:
        """Close the innermost array, object or string."""
        frame = self._tracker.pop()
        self.sink.append(_CLOSERS[frame.kind])

    @contextmanager
    def array(self) -> Iterator["JsonContext"]:
        self.start_array()
        yield self
        self.end()

    @contextmanager
    def object(self) -> Iterator["JsonContext"]:
        self.start_object()
        yield self
        self.end()

    def add_key(self, key: str) -> None:
        quoted = quote_string(key)
        sep = self._tracker.begin_key()
        self.sink.append(sep + quoted + ":")

    def add_key_if_present(self, key: str, value: Optional[str]) -> None:
        """Add ``key`` with a string value, or nothing at all if ``value`` is None."""
        if value is None:
            return
        self.add_key(key)
        self.add_string(value)

    def add_array_of_strings(self, skip_null: bool, items: Iterable[Optional[str]]) -> None:
        """
        Add an array of strings where ``None`` items are either written as
        ``null`` or, with ``skip_null``, left out entirely.
        """
        items = list(items)
        for item in items:
            if item is not None and not isinstance(item, str):
                raise TypeError(f"array item must be str or None, got {type(item)!r}")
        self.start_array()
        for item in items:
            if item is not None:
                self.add_string(item)
            elif not skip_null:
                self.add_null()
        self.end()

    def add_key_value_pairs(self, pairs: PairSource) -> None:
        """Add an object with one string member per pair, in iteration order."""
        if isinstance(pairs, Mapping):
            items = list(pairs.items())
        else:
            items = list(pairs)
        for key, value in items:
            if not isinstance(key, str) or not isinstance(value, str):
                raise TypeError(f"pair must be (str, str), got ({type(key)!r}, {type(value)!r})")
        self.start_object()
        for key, value in items:
            self.add_key(key)
            self.add_string(value)
        self.end()
