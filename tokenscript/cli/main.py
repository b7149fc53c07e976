"""
Command-line entry point for inspecting the TokenScript core.
"""

import code
import json
import logging
import sys

from tokenscript.cli.parser import build_parser
from tokenscript.error_types import (MANAGER_ERROR_KINDS, Manager,
                                     all_error_kinds, error_code,
                                     manager_error, manager_for_kind)
from tokenscript.highlighting import colorize_json
from tokenscript.symbol_table import SymbolTable


def _kind_rows(manager_name: str | None) -> list[dict[str, str]]:
    if manager_name is None:
        kinds = all_error_kinds()
    else:
        kinds = tuple(MANAGER_ERROR_KINDS[Manager(manager_name)])
    return [
        {
            "code": error_code(kind),
            "manager": manager_for_kind(kind).value,
            "kind": kind.value,
            "category": kind.category,
        }
        for kind in kinds
    ]


def _table_from_assignments(assignments: list[str]) -> SymbolTable:
    table = SymbolTable()
    for assignment in assignments:
        name, separator, value = assignment.partition("=")
        if not separator:
            raise ValueError(f"Expected NAME=VALUE, got {assignment!r}")
        table.set(name, value or None)
    return table


def main(args=None) -> int:
    """Return CLI exit codes so automation can distinguish success from failure."""
    parser = build_parser()
    args = parser.parse_args(args)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    match args.command:
        case "kinds":
            rows = _kind_rows(args.manager)
            if args.format == "json":
                print(colorize_json(json.dumps(rows, indent=2)))
            else:
                for row in rows:
                    print(f"{row['code']}\t{row['category']}")
            return 0
        case "lookup":
            try:
                table = _table_from_assignments(args.assignments)
            except ValueError as error:
                print(error, file=sys.stderr)
                return 2
            if not table.is_defined(args.name):
                print("undefined")
                return 1
            print(table.get(args.name))
            return 0
        case "shell":
            code.interact(
                banner="TokenScript shell (table, SymbolTable, manager_error, all_error_kinds)",
                local={
                    "table": SymbolTable(),
                    "SymbolTable": SymbolTable,
                    "manager_error": manager_error,
                    "all_error_kinds": all_error_kinds,
                },
            )
            return 0
        case _:
            parser.print_help(sys.stderr)
            return 2
