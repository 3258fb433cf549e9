"""Value types for luasv-core."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Union


class _Nil:
    """Singleton for Lua ``nil``."""

    _instance: "_Nil | None" = None

    def __new__(cls) -> "_Nil":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Nil"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "nil"

    def to_python(self) -> None:
        return None


Nil = _Nil()


@dataclass
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()

    def to_python(self) -> bool:
        return self.value


@dataclass
class VNumber:
    value: float

    def __str__(self) -> str:
        return format_number(self.value)

    def to_python(self) -> int | float:
        v = self.value
        if math.isfinite(v) and v == int(v):
            return int(v)
        return v


@dataclass
class VText:
    value: str

    def __str__(self) -> str:
        return self.value

    def to_python(self) -> str:
        return self.value


@dataclass
class VList:
    items: list["Value"]

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"

    def to_python(self) -> list:
        return [v.to_python() for v in self.items]


@dataclass
class VDict:
    entries: dict[str, "Value"]

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}: {v}" for k, v in self.entries.items()) + "}"

    def to_python(self) -> dict[str, Any]:
        return {k: v.to_python() for k, v in self.entries.items()}


Value = Union[_Nil, VBool, VNumber, VText, VList, VDict]


def format_number(v: float) -> str:
    """Text form of a number, used for map keys: ``1.0`` -> ``"1"``."""
    if not math.isfinite(v):
        return "inf" if v > 0 else "-inf"
    if v == int(v):
        return str(int(v))
    return str(v)
