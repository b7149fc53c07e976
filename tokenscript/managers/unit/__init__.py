from tokenscript.managers.unit.errors import (UnitManagerError,
                                              UnitManagerErrorKind)

__all__ = ["UnitManagerError", "UnitManagerErrorKind"]
