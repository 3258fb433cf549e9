"""luasv-core: read Lua table literals (saved variables) as plain data."""

from __future__ import annotations

import json

from .errors import (
    ErrorKind,
    ExpectedCloseBrace,
    ExpectedCloseBracket,
    ExpectedEquals,
    InvalidNumber,
    LuaSVError,
    ParseError,
    UnexpectedCharacter,
    UnterminatedString,
)
from .getter import apply_getter, lookup
from .reader import load, parse
from .values import (
    Nil,
    Value,
    VBool,
    VDict,
    VList,
    VNumber,
    VText,
)


def to_json(value: Value, indent: int | None = 2) -> str:
    """Render a parsed value as JSON text."""
    return json.dumps(value.to_python(), indent=indent, ensure_ascii=False)


__all__ = [
    "parse",
    "load",
    "to_json",
    "lookup",
    "apply_getter",
    "Nil",
    "Value",
    "VBool",
    "VDict",
    "VList",
    "VNumber",
    "VText",
    "ErrorKind",
    "LuaSVError",
    "ParseError",
    "ExpectedEquals",
    "UnexpectedCharacter",
    "ExpectedCloseBracket",
    "ExpectedCloseBrace",
    "UnterminatedString",
    "InvalidNumber",
]
