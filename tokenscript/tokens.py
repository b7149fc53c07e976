from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Token:
    """A lexed token, kept on errors so messages can point at the source."""

    type: str
    value: Any = None
    line: int | None = None


__all__ = ["Token"]
