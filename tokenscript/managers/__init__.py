"""Shared pieces of the value managers: the manager tag and error base class."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, ClassVar

from tokenscript.exceptions import InterpreterError
from tokenscript.tokens import Token


class Manager(StrEnum):
    """Tag identifying which manager raised an error."""

    COLOR = "color"
    UNIT = "unit"


class ManagerErrorBase(InterpreterError):
    """Interpreter error raised by a manager, tagged with one of its kinds.

    Subclasses fix ``manager`` and ``kinds``; a kind from another manager's
    enumeration is rejected so every instance belongs to exactly one manager.
    """

    manager: ClassVar[Manager]
    kinds: ClassVar[type[StrEnum]]

    def __init__(
        self,
        kind: StrEnum,
        message: str,
        line: int | None = None,
        token: Token | None = None,
        **payload: Any,
    ) -> None:
        if not isinstance(kind, self.kinds):
            raise TypeError(
                f"{type(self).__name__} expects a {self.kinds.__name__}, got {kind!r}"
            )
        super().__init__(message, line, token, manager=self.manager, kind=kind)
        self.payload: dict[str, Any] = payload

    def __reduce__(self) -> tuple[Any, ...]:
        return (
            type(self),
            (self.kind, self.detail, self.line, self.token),
            self.__dict__,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!s}, message={self.detail!r})"


__all__ = ["Manager", "ManagerErrorBase"]
