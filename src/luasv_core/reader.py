"""Reader layer: recursive-descent parsing of a Lua table literal."""

from __future__ import annotations

import logging
import os

from .cursor import Cursor
from .errors import (
    ExpectedCloseBrace,
    ExpectedCloseBracket,
    ExpectedEquals,
    UnexpectedCharacter,
)
from .scanners import QUOTES, read_identifier, read_number, read_string
from .table import Key, TableBuilder
from .values import Nil, Value, VBool, VDict, VList, VNumber, VText

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")

# Matched as raw substrings: "truey" reads as ``true`` followed by "y".
_KEYWORDS = (
    ("true", lambda: VBool(True)),
    ("false", lambda: VBool(False)),
    ("nil", lambda: Nil),
)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def parse(text: str) -> VDict:
    """Parse ``name = <value>`` and return ``VDict({name: value})``.

    Input after the value is not checked.
    """
    cursor = Cursor(text.strip())
    logger.debug("parsing %d characters", len(cursor.text))
    result = parse_assignment(cursor)
    logger.debug("parsed %r, stopped at offset %d", next(iter(result.entries)), cursor.offset)
    return result


def load(path: str | os.PathLike, encoding: str = "utf-8") -> VDict:
    """Read and parse a saved-variables file."""
    with open(path, encoding=encoding) as fh:
        text = fh.read()
    logger.debug("loaded %s", path)
    return parse(text)


# ---------------------------------------------------------------------------
# Assignment
# ---------------------------------------------------------------------------

def parse_assignment(cursor: Cursor) -> VDict:
    cursor.skip_trivia()
    start = cursor.offset
    name = read_identifier(cursor)
    if not name:
        raise ExpectedEquals(start)

    cursor.skip_trivia()
    if cursor.peek() != "=":
        raise ExpectedEquals(cursor.offset)
    cursor.advance()

    cursor.skip_trivia()
    return VDict({name: parse_value(cursor)})


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------

def parse_value(cursor: Cursor) -> Value:
    """Dispatch on the next significant character."""
    cursor.skip_trivia()
    c = cursor.peek()

    if c == "{":
        return parse_table(cursor)
    if c in QUOTES:
        return VText(read_string(cursor))
    if c is not None and (c in _DIGITS or c == "-"):
        return VNumber(read_number(cursor))
    for word, make in _KEYWORDS:
        if cursor.startswith(word):
            cursor.advance(len(word))
            return make()

    raise UnexpectedCharacter(c, cursor.offset)


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

def parse_table(cursor: Cursor) -> VList | VDict:
    """Parse ``{ ... }`` into a VList or a VDict.

    Entries are ``[key] = value``, ``name = value`` or a bare value.
    Commas between entries are optional.
    """
    cursor.advance()  # {
    cursor.skip_trivia()
    table = TableBuilder()

    while not cursor.at_end() and cursor.peek() != "}":
        cursor.skip_trivia()
        if cursor.peek() == "}":
            break

        if cursor.peek() == "[":
            key, value = _parse_indexed_entry(cursor)
            table.add_indexed(key, value)
        else:
            mark = cursor.mark()
            name = read_identifier(cursor)
            cursor.skip_trivia()
            if name and cursor.peek() == "=":
                cursor.advance()
                cursor.skip_trivia()
                table.add_named(name, parse_value(cursor))
            else:
                cursor.reset(mark)
                table.add_positional(parse_value(cursor))

        cursor.skip_trivia()
        if cursor.peek() == ",":
            cursor.advance()
            cursor.skip_trivia()

    if cursor.peek() != "}":
        raise ExpectedCloseBrace(cursor.offset)
    cursor.advance()

    return table.build()


def _parse_indexed_entry(cursor: Cursor) -> tuple[Key, Value]:
    cursor.advance()  # [
    cursor.skip_trivia()

    key: Key
    if cursor.peek() in QUOTES:
        key = read_string(cursor)
    else:
        key = read_number(cursor)

    cursor.skip_trivia()
    if cursor.peek() != "]":
        raise ExpectedCloseBracket(cursor.offset)
    cursor.advance()

    cursor.skip_trivia()
    if cursor.peek() != "=":
        raise ExpectedEquals(cursor.offset)
    cursor.advance()

    cursor.skip_trivia()
    return key, parse_value(cursor)
