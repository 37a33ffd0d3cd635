"""JSON string escaping."""

from __future__ import annotations

_NAMED_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "/": "\\/",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_DEL = 0x7F


def _needs_escape(ch: str) -> bool:
    code = ord(ch)
    return code < 0x20 or code == _DEL or ch in _NAMED_ESCAPES


def escape_string(text: str) -> str:
    """Return the body of a JSON string literal for ``text`` (no quotes).

    ``"``, ``\\`` and ``/`` are always escaped, the five named control
    characters use their short forms, and every other control character
    plus DEL becomes ``\\u00xx`` with lowercase hex digits.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text)!r}")
    if not any(_needs_escape(ch) for ch in text):
        return text

    out: list[str] = []
    for ch in text:
        named = _NAMED_ESCAPES.get(ch)
        if named is not None:
            out.append(named)
            continue
        code = ord(ch)
        if code < 0x20 or code == _DEL:
            out.append(f"\\u{code:04x}")
        else:
            out.append(ch)
    return "".join(out)


def quote_string(text: str) -> str:
    """Escape ``text`` and wrap it in double quotes."""
    return '"' + escape_string(text) + '"'
