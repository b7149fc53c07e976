import logging

import pytest

from tokenscript.symbol_table import SymbolTable


class ColorValue:
    """Stand-in for a typed language value; always truthy like real symbols."""

    def __init__(self, value: str):
        self.value = value


@pytest.mark.parametrize(
    ("stored", "looked_up"),
    [("Color", "COLOR"), ("color", "Color"), ("fooBar", "FOOBAR"), ("ÄBC", "äbc")],
)
def test_lookup_ignores_case(stored, looked_up):
    """Names differing only in case resolve to the same binding."""
    table = SymbolTable()
    value = ColorValue("#ff0000")
    table.set(stored, value)
    assert table.get(looked_up) is value
    assert table.is_defined(looked_up)


def test_color_scenario():
    table = SymbolTable()
    red = ColorValue("#ff0000")
    table.set("Color", red)
    assert table.get("COLOR") is red
    assert table.is_defined("color") is True


def test_fresh_table_has_nothing_defined():
    """Unknown names are a silent, non-error outcome."""
    table = SymbolTable()
    assert table.get("x") is None
    assert table.is_defined("x") is False


def test_absent_binding_is_present_but_not_defined():
    """A binding set to None exists in storage yet is reported as undefined."""
    table = SymbolTable()
    table.set("y", None)
    assert table.get("y") is None
    assert table.is_defined("y") is False
    assert "y" in table
    assert "Y" in table


@pytest.mark.parametrize("falsy", [0, "", [], False])
def test_falsy_values_follow_truthiness_rule(falsy):
    table = SymbolTable()
    table.set("value", falsy)
    assert table.get("value") is None
    assert table.is_defined("value") is False
    assert "value" in table


@pytest.mark.parametrize("value", [1, "text", ColorValue("#000"), [0]])
def test_truthy_values_are_defined(value):
    table = SymbolTable()
    table.set("n", value)
    assert table.is_defined("n")
    assert table.get("n") is value


def test_set_overwrites_previous_binding():
    table = SymbolTable()
    first, second = ColorValue("#111"), ColorValue("#222")
    table.set("Primary", first)
    table.set("PRIMARY", second)
    assert table.get("primary") is second
    assert list(table.names()) == ["primary"]


def test_repeated_set_is_idempotent():
    once, twice = SymbolTable(), SymbolTable()
    value = ColorValue("#abc")
    once.set("n", value)
    twice.set("n", value)
    twice.set("n", value)
    assert list(once.names()) == list(twice.names())
    assert once.get("n") is twice.get("n")
    assert once.is_defined("n") == twice.is_defined("n")
    assert repr(once) == repr(twice)


def test_empty_identifier_is_a_valid_key():
    table = SymbolTable()
    table.set("", 5)
    assert table.get("") == 5
    assert table.is_defined("")


def test_setting_absent_over_a_value_undefines_it():
    table = SymbolTable()
    table.set("z", 3)
    table.set("Z", None)
    assert table.get("z") is None
    assert not table.is_defined("z")


def test_child_scope_resolves_outward():
    """Nested scopes see enclosing bindings until they shadow them."""
    outer = SymbolTable()
    outer.set("Size", 16)
    inner = outer.child()
    assert inner.parent is outer
    assert inner.get("size") == 16
    assert inner.is_defined("SIZE")
    assert "size" not in inner

    inner.set("size", 8)
    assert inner.get("size") == 8
    assert outer.get("size") == 16


def test_absent_binding_shadows_enclosing_scope():
    outer = SymbolTable()
    outer.set("a", 1)
    inner = outer.child()
    inner.set("A", None)
    assert inner.get("a") is None
    assert not inner.is_defined("a")
    assert outer.is_defined("a")


def test_contains_rejects_non_strings():
    table = SymbolTable()
    table.set("1", 1)
    assert 1 not in table


def test_overwrite_is_logged(caplog):
    table = SymbolTable()
    table.set("x", 1)
    with caplog.at_level(logging.DEBUG, logger="tokenscript.symbol_table"):
        table.set("X", 2)
    assert "Overwriting binding 'x'" in caplog.text
