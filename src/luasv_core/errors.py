"""Exceptions raised while reading Lua table literals."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    ExpectedEquals = "expected_equals"
    UnexpectedCharacter = "unexpected_character"
    ExpectedCloseBracket = "expected_close_bracket"
    ExpectedCloseBrace = "expected_close_brace"
    UnterminatedString = "unterminated_string"
    InvalidNumber = "invalid_number"


class LuaSVError(Exception):
    """Base class for all luasv-core errors."""


class ParseError(LuaSVError):
    """A syntax error at a known offset of the source text."""

    kind: ErrorKind

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"{message} at position {offset}")
        self.message = message
        self.offset = offset


class ExpectedEquals(ParseError):
    kind = ErrorKind.ExpectedEquals

    def __init__(self, offset: int) -> None:
        super().__init__("Expected '='", offset)


class UnexpectedCharacter(ParseError):
    kind = ErrorKind.UnexpectedCharacter

    def __init__(self, char: str | None, offset: int) -> None:
        shown = "end of input" if char is None else f"'{char}'"
        super().__init__(f"Unexpected character {shown}", offset)
        self.char = char


class ExpectedCloseBracket(ParseError):
    kind = ErrorKind.ExpectedCloseBracket

    def __init__(self, offset: int) -> None:
        super().__init__("Expected ']'", offset)


class ExpectedCloseBrace(ParseError):
    kind = ErrorKind.ExpectedCloseBrace

    def __init__(self, offset: int) -> None:
        super().__init__("Expected '}'", offset)


class UnterminatedString(ParseError):
    kind = ErrorKind.UnterminatedString

    def __init__(self, offset: int) -> None:
        super().__init__("Unterminated string", offset)


class InvalidNumber(ParseError):
    kind = ErrorKind.InvalidNumber

    def __init__(self, text: str, offset: int) -> None:
        super().__init__(f"Invalid number '{text}'", offset)
        self.text = text
