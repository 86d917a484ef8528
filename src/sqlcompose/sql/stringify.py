"""Textual form of scalar values spliced into templates with ``%s``."""

from __future__ import annotations


def stringify(value: object) -> str:
    """Convert ``value`` to the text inserted for an inline ``%s`` directive.

    The result is raw SQL text, never a bound parameter.

    Examples:
        >>> stringify(42)
        '42'
        >>> stringify(1.5)
        '1.500000'
        >>> stringify(b"users")
        'users'
        >>> stringify(None)
        ''
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return format(value, "d")
    if isinstance(value, float):
        return format(value, ".6f")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    if type(value).__str__ is not object.__str__:
        return str(value)
    return repr(value)
