"""
TokenScript core

Symbol resolution and error classification shared by the TokenScript lexer,
parser, evaluator and value managers.
"""

from tokenscript.error_types import (InterpreterErrorType, Manager,
                                     ManagerError, all_error_kinds)
from tokenscript.exceptions import (InterpreterError, LanguageError,
                                    LexerError, ParserError)
from tokenscript.symbol_table import SymbolTable

__all__ = [
    "InterpreterError",
    "InterpreterErrorType",
    "LanguageError",
    "LexerError",
    "Manager",
    "ManagerError",
    "ParserError",
    "SymbolTable",
    "all_error_kinds",
]
