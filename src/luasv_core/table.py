"""Table entries: accumulation and list-vs-map inference."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from .values import Value, VDict, VList, format_number

logger = logging.getLogger(__name__)

Key = Union[str, float]


@dataclass
class TableEntry:
    key: Key  # str for named/string keys, float for numeric keys
    value: Value


@dataclass
class TableBuilder:
    """Collects the entries of one ``{...}`` table in source order.

    A table stays list-shaped only while every entry's key is the number
    equal to ``next_index``. Once broken, it stays broken for the rest
    of the table.
    """

    entries: list[TableEntry] = field(default_factory=list)
    is_list: bool = True
    next_index: int = 1

    def add_indexed(self, key: Key, value: Value) -> None:
        """Add a ``[key] = value`` entry."""
        self._check(key)
        self.entries.append(TableEntry(key, value))
        self.next_index += 1

    def add_named(self, name: str, value: Value) -> None:
        """Add a ``name = value`` entry; named entries never extend a list."""
        self.is_list = False
        self.entries.append(TableEntry(name, value))

    def add_positional(self, value: Value) -> None:
        """Add a bare value under the next positional index."""
        key = float(self.next_index)
        self._check(key)
        self.entries.append(TableEntry(key, value))
        self.next_index += 1

    def _check(self, key: Key) -> None:
        if not self.is_list:
            return
        if isinstance(key, str) or key != self.next_index:
            self.is_list = False

    def build(self) -> VList | VDict:
        """Materialise the entries as a VList (keys 1..N) or a VDict."""
        if self.is_list and self.entries:
            logger.debug("table of %d entries read as list", len(self.entries))
            return VList([e.value for e in self.entries])

        entries: dict[str, Value] = {}
        for e in self.entries:
            entries[key_text(e.key)] = e.value
        logger.debug("table of %d entries read as map", len(self.entries))
        return VDict(entries)


def key_text(key: Key) -> str:
    if isinstance(key, str):
        return key
    return format_number(key)
