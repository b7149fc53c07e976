import argparse

from tokenscript.error_types import Manager


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tokenscript",
        description="Inspect the TokenScript error taxonomy and symbol resolution.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command")

    kinds = subparsers.add_parser("kinds", help="List manager error kinds")
    kinds.add_argument(
        "--manager",
        choices=[manager.value for manager in Manager],
        help="Only list the kinds of this manager",
    )
    kinds.add_argument("--format", choices=["text", "json"], default="text")

    lookup = subparsers.add_parser(
        "lookup", help="Resolve a name against a table built from assignments"
    )
    lookup.add_argument("name", help="Identifier to look up")
    lookup.add_argument(
        "-s",
        "--set",
        dest="assignments",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Bind VALUE to NAME before the lookup; an empty VALUE stores null",
    )

    subparsers.add_parser("shell", help="Interactive console with a symbol table")
    return parser


__all__ = ["build_parser"]
