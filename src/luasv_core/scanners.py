"""Literal scanners: identifiers, quoted strings and numbers."""

from __future__ import annotations

import re

from .cursor import Cursor
from .errors import InvalidNumber, UnterminatedString

_IDENTIFIER_RE = re.compile(r"[A-Za-z0-9_$]*")
_NUMBER_RE = re.compile(r"-?[0-9]*(?:\.[0-9]*)?")

QUOTES = ('"', "'")

_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
}


def read_identifier(cursor: Cursor) -> str:
    """Read a run of ``[A-Za-z0-9_$]``; may return ``""``."""
    m = _IDENTIFIER_RE.match(cursor.text, cursor.offset)
    cursor.offset = m.end()
    return m.group()


def read_string(cursor: Cursor) -> str:
    """Read a ``"..."`` or ``'...'`` string starting at the opening quote.

    ``\\n``, ``\\r``, ``\\t``, ``\\\\`` and the escaped quote are decoded;
    any other escaped character is kept with its backslash dropped.
    """
    quote = cursor.peek()
    cursor.advance()
    text = cursor.text
    n = len(text)
    i = cursor.offset
    out: list[str] = []

    while i < n and text[i] != quote:
        c = text[i]
        if c == "\\":
            i += 1
            if i < n:
                out.append(_ESCAPES.get(text[i], text[i]))
                i += 1
        else:
            out.append(c)
            i += 1

    if i >= n:
        cursor.offset = n
        raise UnterminatedString(n)

    cursor.offset = i + 1
    return "".join(out)


def read_number(cursor: Cursor) -> float:
    """Read ``-?digits(.digits)?`` and convert it to a float."""
    start = cursor.offset
    m = _NUMBER_RE.match(cursor.text, start)
    raw = m.group()
    cursor.offset = m.end()
    try:
        return float(raw)
    except ValueError:
        raise InvalidNumber(raw, start) from None
