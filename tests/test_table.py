"""Tests for TableBuilder list-vs-map inference."""

from luasv_core.table import TableBuilder, key_text
from luasv_core.values import VDict, VList, VText


def _t(s):
    return VText(s)


def test_positional_entries_build_list():
    t = TableBuilder()
    t.add_positional(_t("a"))
    t.add_positional(_t("b"))
    assert t.build() == VList([_t("a"), _t("b")])


def test_empty_builds_dict():
    assert TableBuilder().build() == VDict({})


def test_sequential_indexed_entries_build_list():
    t = TableBuilder()
    t.add_indexed(1.0, _t("a"))
    t.add_indexed(2.0, _t("b"))
    assert isinstance(t.build(), VList)


def test_gap_breaks_list_permanently():
    t = TableBuilder()
    t.add_indexed(1.0, _t("a"))
    t.add_indexed(3.0, _t("b"))
    t.add_indexed(3.0, _t("c"))  # would match the counter now, still a map
    assert t.is_list is False
    assert t.build() == VDict({"1": _t("a"), "3": _t("c")})


def test_string_key_never_counts_as_index():
    t = TableBuilder()
    t.add_indexed("1", _t("a"))
    assert t.build() == VDict({"1": _t("a")})


def test_named_entry_does_not_advance_positional_index():
    t = TableBuilder()
    t.add_named("x", _t("a"))
    t.add_positional(_t("b"))
    assert t.build() == VDict({"x": _t("a"), "1": _t("b")})


def test_positional_after_indexed_continues_numbering():
    t = TableBuilder()
    t.add_indexed(1.0, _t("a"))
    t.add_positional(_t("b"))
    assert t.build() == VList([_t("a"), _t("b")])


def test_duplicate_key_keeps_last_value():
    t = TableBuilder()
    t.add_positional(_t("a"))
    t.add_indexed(1.0, _t("b"))
    assert t.build() == VDict({"1": _t("b")})


def test_key_text():
    assert key_text("name") == "name"
    assert key_text(3.0) == "3"
    assert key_text(1.5) == "1.5"
