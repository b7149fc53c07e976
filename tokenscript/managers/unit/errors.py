"""Error kinds raised by the unit manager."""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar

from tokenscript.managers import Manager, ManagerErrorBase


class UnitManagerErrorKind(StrEnum):
    # Specification errors
    UNKNOWN_UNIT = "UNKNOWN_UNIT"
    INVALID_SPECIFICATION = "INVALID_SPECIFICATION"

    # Conversion errors
    CONVERSION_IMPOSSIBLE = "CONVERSION_IMPOSSIBLE"
    MULTIPLE_RELATIVE_UNITS = "MULTIPLE_RELATIVE_UNITS"

    # Relative unit resolution
    RELATIVE_ARGUMENT_COUNT = "RELATIVE_ARGUMENT_COUNT"
    INVALID_ABSOLUTE_RESULT = "INVALID_ABSOLUTE_RESULT"

    @property
    def category(self) -> str:
        return _CATEGORIES[self]


_CATEGORIES: dict[UnitManagerErrorKind, str] = {
    UnitManagerErrorKind.UNKNOWN_UNIT: "specification",
    UnitManagerErrorKind.INVALID_SPECIFICATION: "specification",
    UnitManagerErrorKind.CONVERSION_IMPOSSIBLE: "conversion",
    UnitManagerErrorKind.MULTIPLE_RELATIVE_UNITS: "conversion",
    UnitManagerErrorKind.RELATIVE_ARGUMENT_COUNT: "relative",
    UnitManagerErrorKind.INVALID_ABSOLUTE_RESULT: "relative",
}


class UnitManagerError(ManagerErrorBase):
    """Raised when a unit is unknown or a value cannot be converted."""

    manager: ClassVar[Manager] = Manager.UNIT
    kinds: ClassVar[type[StrEnum]] = UnitManagerErrorKind


__all__ = ["UnitManagerError", "UnitManagerErrorKind"]
