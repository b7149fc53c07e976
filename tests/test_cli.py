import code
import json

from tokenscript.__main__ import main
from tokenscript.error_types import all_error_kinds, manager_error
from tokenscript.symbol_table import SymbolTable


def test_cli_kinds_text(capsys):
    assert main(["kinds"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(all_error_kinds())
    assert "color.MISSING_SPEC\tspecification" in lines
    assert "unit.CONVERSION_IMPOSSIBLE\tconversion" in lines


def test_cli_kinds_json_for_one_manager(capsys, monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    assert main(["kinds", "--manager", "unit", "--format", "json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert {row["manager"] for row in rows} == {"unit"}
    assert rows[0] == {
        "code": "unit.UNKNOWN_UNIT",
        "manager": "unit",
        "kind": "UNKNOWN_UNIT",
        "category": "specification",
    }


def test_cli_lookup_defined(capsys):
    assert main(["lookup", "COLOR", "-s", "Color=#ff0000"]) == 0
    assert capsys.readouterr().out.strip() == "#ff0000"


def test_cli_lookup_absent_value(capsys):
    assert main(["lookup", "y", "--set", "y="]) == 1
    assert capsys.readouterr().out.strip() == "undefined"


def test_cli_lookup_unknown_name(capsys):
    assert main(["lookup", "x"]) == 1
    assert capsys.readouterr().out.strip() == "undefined"


def test_cli_lookup_rejects_malformed_assignment(capsys):
    assert main(["lookup", "x", "-s", "x"]) == 2
    assert "Expected NAME=VALUE" in capsys.readouterr().err


def test_cli_without_command_prints_help(capsys):
    assert main([]) == 2
    assert "usage: tokenscript" in capsys.readouterr().err


def test_cli_shell_preloads_symbol_table_and_taxonomy(monkeypatch):
    """The console starts with a table and the error helpers in scope."""
    captured = {}

    def fake_interact(banner=None, local=None):
        captured["banner"] = banner
        captured["local"] = local

    monkeypatch.setattr(code, "interact", fake_interact)
    assert main(["shell"]) == 0

    local = captured["local"]
    assert local["SymbolTable"] is SymbolTable
    assert local["manager_error"] is manager_error
    assert local["all_error_kinds"] is all_error_kinds
    assert isinstance(local["table"], SymbolTable)
    assert "TokenScript shell" in captured["banner"]
