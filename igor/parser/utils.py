# Igor Org Tooling — (c) 2025 — MIT Licensed
"""
Type coercion for Igor command input.

`cast_to_type` is the single point where raw command line tokens become typed
values, shared by parameter and argument parsing.

Numbers are read the way a lenient number reader does: the longest numeric
prefix of the token is used ("12px" → 12, "3.9" as int → 3) and only a token
with no numeric prefix is rejected. Booleans never fail: anything other than
"true", "t" or "1" (trimmed, case-insensitive) is False.
"""
import re

from igor.exceptions import InvalidTypeError
from igor.parser.parser_types import ValueType

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:Infinity|[0-9]+\.?[0-9]*(?:[eE][+-]?[0-9]+)?|\.[0-9]+(?:[eE][+-]?[0-9]+)?))")

TRUE_VALUES = frozenset({"true", "t", "1"})


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Args:
        value (str): The input string.

    Returns:
        bool: True only for "true", "t" or "1"; False for everything else.
    """
    return value.strip().lower() in TRUE_VALUES


def coerce_int(value: str) -> int:
    match = _INT_PREFIX.match(value)
    if not match:
        raise InvalidTypeError(f"{value} is not of type int")
    return int(match.group(1))


def coerce_float(value: str) -> float:
    match = _FLOAT_PREFIX.match(value)
    if not match:
        raise InvalidTypeError(f"{value} is not of type float")
    return float(match.group(1).replace("Infinity", "inf"))


def resolve_type(value_type: ValueType | str | None) -> ValueType:
    """Resolve a declared type name to a `ValueType`."""
    if value_type is None:
        return ValueType.STRING
    if isinstance(value_type, ValueType):
        return value_type
    try:
        return ValueType(value_type)
    except ValueError:
        expected = ", ".join(str(choice) for choice in ValueType.choices())
        raise InvalidTypeError(
            f"invalid type received: {value_type} (expected one of: {expected})"
        ) from None


def cast_to_type(value: str, value_type: ValueType | str | None = None) -> str | int | float | bool:
    """
    Coerce a raw token to the declared type.

    Args:
        value (str): The raw token.
        value_type (ValueType | str | None): "string" (default), "int", "float"
            or "boolean".

    Returns:
        str | int | float | bool: The coerced value.

    Raises:
        InvalidTypeError: If the type is unsupported, or the value has no numeric
            prefix for "int" / "float".
    """
    resolved = resolve_type(value_type)
    if resolved is ValueType.STRING:
        return str(value)
    if resolved is ValueType.INT:
        return coerce_int(value)
    if resolved is ValueType.FLOAT:
        return coerce_float(value)
    return coerce_bool(value)
