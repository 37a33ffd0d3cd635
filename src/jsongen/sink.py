"""Append-only text destinations for the JSON writer."""

from __future__ import annotations

from typing import Protocol, TextIO


class Sink(Protocol):
    def append(self, text: str) -> None: ...


class StringSink:
    """Growable in-memory text buffer."""

    def __init__(self) -> None:
        self._chunks: list[str] = []

    def append(self, text: str) -> None:
        if text:
            self._chunks.append(text)

    def getvalue(self) -> str:
        if len(self._chunks) > 1:
            self._chunks = ["".join(self._chunks)]
        return self._chunks[0] if self._chunks else ""

    def reset(self) -> None:
        self._chunks.clear()

    def __len__(self) -> int:
        return sum(len(c) for c in self._chunks)

    def __str__(self) -> str:
        return self.getvalue()


class StreamSink:
    """Forward appended text to a writable text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def append(self, text: str) -> None:
        if text:
            self._stream.write(text)
