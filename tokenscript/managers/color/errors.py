"""Error kinds raised by the color manager."""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar

from tokenscript.managers import Manager, ManagerErrorBase


class ColorManagerErrorKind(StrEnum):
    # Attribute errors
    STRING_VALUE_ASSIGNMENT = "STRING_VALUE_ASSIGNMENT"
    ATTRIBUTE_CHAIN_TOO_LONG = "ATTRIBUTE_CHAIN_TOO_LONG"

    # Specification errors
    MISSING_SPEC = "MISSING_SPEC"
    MISSING_SCHEMA = "MISSING_SCHEMA"

    # Type errors
    INVALID_ATTRIBUTE_TYPE = "INVALID_ATTRIBUTE_TYPE"

    @property
    def category(self) -> str:
        return _CATEGORIES[self]


_CATEGORIES: dict[ColorManagerErrorKind, str] = {
    ColorManagerErrorKind.STRING_VALUE_ASSIGNMENT: "attribute",
    ColorManagerErrorKind.ATTRIBUTE_CHAIN_TOO_LONG: "attribute",
    ColorManagerErrorKind.MISSING_SPEC: "specification",
    ColorManagerErrorKind.MISSING_SCHEMA: "specification",
    ColorManagerErrorKind.INVALID_ATTRIBUTE_TYPE: "type",
}


class ColorManagerError(ManagerErrorBase):
    """Raised when a color value cannot be built, read or modified."""

    manager: ClassVar[Manager] = Manager.COLOR
    kinds: ClassVar[type[StrEnum]] = ColorManagerErrorKind


__all__ = ["ColorManagerError", "ColorManagerErrorKind"]
