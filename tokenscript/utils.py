def type_equals(type_a: str | None, type_b: str | None) -> bool:
    """Compare type names the way identifiers are compared: ignoring case."""
    if type_a is None or type_b is None:
        return type_a is type_b
    return type_a.lower() == type_b.lower()


def capitalize(value: str) -> str:
    return value[:1].upper() + value[1:].lower()


def type_name(base: str, sub: str | None = None) -> str:
    """Build a display name from a base type and optional subtype.

    ``type_name("color", "hex")`` gives ``"Color.Hex"``, ``type_name("COLOR")``
    gives ``"Color"``.
    """
    if sub:
        return f"{capitalize(base)}.{capitalize(sub)}"
    return capitalize(base)


__all__ = ["capitalize", "type_equals", "type_name"]
