# Igor Org Tooling — (c) 2025 — MIT Licensed
"""
Defines `ValueType`, the set of types a command input can be declared with.

Every parameter and argument registration carries one of these types; the raw
string token supplied on the command line is coerced to it by
`igor.parser.utils.cast_to_type`.

Example:
    ValueType("int")     → ValueType.INT
    ValueType("number")  → ValueError
"""
from __future__ import annotations

from enum import Enum


class ValueType(Enum):
    """
    Supported input types.

    Members:
        STRING: Keep the token unchanged (default).
        INT: Base-10 integer.
        FLOAT: Floating-point number.
        BOOLEAN: Permissive boolean; only "true", "t" and "1" are True.
    """

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOLEAN = "boolean"

    @classmethod
    def choices(cls) -> list[ValueType]:
        """Return a list of all value types."""
        return list(cls)

    def __str__(self) -> str:
        return self.value
