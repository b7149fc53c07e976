"""Per-scope storage of identifier bindings with case-insensitive names."""

from __future__ import annotations

import logging
from typing import Any, Iterator

logger = logging.getLogger(__name__)


class SymbolTable:
    """Identifier -> value bindings for one evaluation scope.

    Names are stored lower-cased, so ``Foo`` and ``foo`` are the same binding.
    ``None`` is the absent marker. A binding may hold it (or any falsy value)
    and still exist: ``get`` then returns ``None`` and ``is_defined`` reports
    ``False``.

    A table created with a *parent* searches outward only for names it has no
    local binding for; assignments always stay local.
    """

    def __init__(self, parent: SymbolTable | None = None) -> None:
        self.parent = parent
        self._symbols: dict[str, Any] = {}

    def _resolve(self, key: str) -> Any:
        table: SymbolTable | None = self
        while table is not None:
            if key in table._symbols:
                if table is not self:
                    logger.debug("Resolved %r in an enclosing scope", key)
                return table._symbols[key]
            table = table.parent
        return None

    def get(self, name: str) -> Any:
        """Return the value bound to *name*, or None when absent or falsy."""
        return self._resolve(name.lower()) or None

    def set(self, name: str, value: Any) -> None:
        """Bind *value* to *name* in this scope, replacing any prior binding."""
        key = name.lower()
        if key in self._symbols:
            logger.debug("Overwriting binding %r", key)
        self._symbols[key] = value

    def is_defined(self, name: str) -> bool:
        """Return True when *name* is bound to a truthy value."""
        return bool(self._resolve(name.lower()))

    def child(self) -> SymbolTable:
        """Create the table for a nested scope."""
        return SymbolTable(parent=self)

    def names(self) -> Iterator[str]:
        """Yield the lower-cased names bound in this scope."""
        return iter(list(self._symbols))

    def __contains__(self, name: object) -> bool:
        """Report raw local storage, including bindings holding None."""
        return isinstance(name, str) and name.lower() in self._symbols

    def __repr__(self) -> str:
        return f"SymbolTable({self._symbols!r})"


__all__ = ["SymbolTable"]
