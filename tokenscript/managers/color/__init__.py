from tokenscript.managers.color.errors import (ColorManagerError,
                                               ColorManagerErrorKind)

__all__ = ["ColorManagerError", "ColorManagerErrorKind"]
