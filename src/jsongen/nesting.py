"""Container nesting state machine for the JSON writer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging

logger = logging.getLogger(__name__)

COMMA = ","


class WellFormednessError(ValueError):
    """Raised when a call sequence would produce malformed JSON."""


class FrameKind(Enum):
    ARRAY = "array"
    OBJECT = "object"
    STRING = "string"


@dataclass
class Frame:
    """One open container on the nesting stack."""

    kind: FrameKind
    has_emitted_member: bool = False
    awaiting_value: bool = False

    @property
    def state(self) -> str:
        if self.kind is FrameKind.OBJECT and self.awaiting_value:
            return "OBJECT-KEY-WRITTEN"
        return f"{self.kind.name}-OPEN"


class NestingTracker:
    """
    Track open containers and decide structural separators.

    Every ``begin_*`` method validates the transition and returns the
    separator (``""`` or ``","``) that must be written before the caller's
    own token. The tracker never writes output itself.

    Several top-level values are accepted one after another; keeping the
    output a single document is left to the caller.
    """

    def __init__(self, max_nesting: int | None = None) -> None:
        self._stack: list[Frame] = []
        self._max_nesting = max_nesting

    @property
    def current_level(self) -> int:
        return len(self._stack)

    @property
    def top(self) -> Frame | None:
        if not self._stack:
            return None
        return self._stack[-1]

    def _fail(self, message: str) -> WellFormednessError:
        logger.debug("well-formedness violation at level %d: %s", self.current_level, message)
        return WellFormednessError(message)

    def begin_value(self) -> str:
        """Account for one value (scalar or container) in the current frame."""
        frame = self.top
        if frame is None:
            return ""
        if frame.kind is FrameKind.STRING:
            raise self._fail("cannot add a value inside a string")
        if frame.kind is FrameKind.OBJECT:
            if not frame.awaiting_value:
                raise self._fail("object member value without a key")
            frame.awaiting_value = False
            frame.has_emitted_member = True
            return ""

        sep = COMMA if frame.has_emitted_member else ""
        frame.has_emitted_member = True
        return sep

    def begin_key(self) -> str:
        frame = self.top
        if frame is None or frame.kind is not FrameKind.OBJECT:
            raise self._fail("key outside of an object")
        if frame.awaiting_value:
            raise self._fail("key written while the previous key has no value")
        frame.awaiting_value = True
        return COMMA if frame.has_emitted_member else ""

    def begin_string_chunk(self) -> None:
        frame = self.top
        if frame is None or frame.kind is not FrameKind.STRING:
            raise self._fail("string chunk outside of a string")

    def push(self, kind: FrameKind) -> str:
        """Open a container as a value of the current frame."""
        if self._max_nesting is not None and self.current_level >= self._max_nesting:
            raise self._fail(f"nesting deeper than {self._max_nesting} levels")
        sep = self.begin_value()
        self._stack.append(Frame(kind=kind))
        return sep

    def pop(self) -> Frame:
        """Close the innermost container and return its frame."""
        frame = self.top
        if frame is None:
            raise self._fail("end without an open container")
        if frame.kind is FrameKind.OBJECT and frame.awaiting_value:
            raise self._fail("object closed while a key has no value")
        self._stack.pop()

        parent = self.top
        if parent is not None:
            parent.has_emitted_member = True
        return frame
