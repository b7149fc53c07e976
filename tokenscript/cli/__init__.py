"""CLI package for the tokenscript entrypoints."""

from tokenscript.cli.main import main
from tokenscript.cli.parser import build_parser

__all__ = ["build_parser", "main"]
