"""Ordered string key/value pairs."""

from __future__ import annotations

from typing import Iterator


class KeyValuePairs:
    """
    Insertion-ordered list of string pairs.

    Unlike a dict, a key may appear more than once; every pair is kept
    and iterated in the order it was added.
    """

    def __init__(self, pairs: list[tuple[str, str]] | None = None) -> None:
        self._pairs: list[tuple[str, str]] = []
        for key, value in pairs or ():
            self.add(key, value)

    def add(self, key: str, value: str) -> None:
        if not isinstance(key, str):
            raise TypeError(f"key must be str, got {type(key)!r}")
        if not isinstance(value, str):
            raise TypeError(f"value must be str, got {type(value)!r}")
        self._pairs.append((key, value))

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value of the first pair with ``key``."""
        for k, v in self._pairs:
            if k == key:
                return v
        return default

    def keys(self) -> list[str]:
        return [k for k, _ in self._pairs]

    def clear(self) -> None:
        self._pairs.clear()

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __repr__(self) -> str:
        return f"KeyValuePairs({self._pairs!r})"
