"""Aggregate error type over every manager's error kinds.

The reporting stage imports everything it needs from here: the kind
enumerations, the error classes, one constructor per manager and the unions
``InterpreterErrorType`` (kinds) and ``ManagerError`` (raised values). Adding a
manager means extending both unions and the ``match`` blocks below.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Any, TypeAlias, assert_never

from tokenscript.managers import Manager, ManagerErrorBase
from tokenscript.managers.color.errors import (ColorManagerError,
                                               ColorManagerErrorKind)
from tokenscript.managers.unit.errors import (UnitManagerError,
                                              UnitManagerErrorKind)
from tokenscript.tokens import Token

InterpreterErrorType: TypeAlias = ColorManagerErrorKind | UnitManagerErrorKind
ManagerError: TypeAlias = ColorManagerError | UnitManagerError

MANAGER_ERROR_KINDS: Mapping[Manager, type[StrEnum]] = MappingProxyType(
    {
        Manager.COLOR: ColorManagerErrorKind,
        Manager.UNIT: UnitManagerErrorKind,
    }
)

MANAGER_ERRORS: Mapping[Manager, type[ManagerErrorBase]] = MappingProxyType(
    {
        Manager.COLOR: ColorManagerError,
        Manager.UNIT: UnitManagerError,
    }
)


def color_manager_error(
    kind: ColorManagerErrorKind,
    message: str,
    line: int | None = None,
    token: Token | None = None,
    **payload: Any,
) -> ColorManagerError:
    return ColorManagerError(kind, message, line, token, **payload)


def unit_manager_error(
    kind: UnitManagerErrorKind,
    message: str,
    line: int | None = None,
    token: Token | None = None,
    **payload: Any,
) -> UnitManagerError:
    return UnitManagerError(kind, message, line, token, **payload)


def manager_for_kind(kind: InterpreterErrorType) -> Manager:
    """Return the manager owning *kind*, or raise TypeError for foreign values."""
    match kind:
        case ColorManagerErrorKind():
            return Manager.COLOR
        case UnitManagerErrorKind():
            return Manager.UNIT
        case _:
            raise TypeError(f"Not a manager error kind: {kind!r}")


def manager_error(
    kind: InterpreterErrorType,
    message: str,
    line: int | None = None,
    token: Token | None = None,
    **payload: Any,
) -> ManagerError:
    """Build the error value for *kind* with the owning manager's constructor."""
    match kind:
        case ColorManagerErrorKind():
            return color_manager_error(kind, message, line, token, **payload)
        case UnitManagerErrorKind():
            return unit_manager_error(kind, message, line, token, **payload)
        case _:
            raise TypeError(f"Not a manager error kind: {kind!r}")


def error_code(kind: InterpreterErrorType) -> str:
    """Stable namespaced code for *kind*, e.g. ``color.MISSING_SPEC``."""
    match kind:
        case ColorManagerErrorKind():
            return f"{Manager.COLOR}.{kind.value}"
        case UnitManagerErrorKind():
            return f"{Manager.UNIT}.{kind.value}"
        case _:
            assert_never(kind)


def all_error_kinds() -> tuple[InterpreterErrorType, ...]:
    """Every kind of every manager, in manager declaration order."""
    kinds: list[Any] = []
    for manager in Manager:
        kinds.extend(MANAGER_ERROR_KINDS[manager])
    return tuple(kinds)


__all__ = [
    "MANAGER_ERRORS",
    "MANAGER_ERROR_KINDS",
    "ColorManagerError",
    "ColorManagerErrorKind",
    "InterpreterErrorType",
    "Manager",
    "ManagerError",
    "UnitManagerError",
    "UnitManagerErrorKind",
    "all_error_kinds",
    "color_manager_error",
    "error_code",
    "manager_error",
    "manager_for_kind",
    "unit_manager_error",
]
