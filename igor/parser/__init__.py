"""
Igor Org Tooling

Copyright (c) 2025.
Licensed under the MIT License. See LICENSE file for details.
"""

from .command_parser import CommandParser
from .parser_types import ValueType
from .pattern import CompiledPattern, ParameterDescriptor, compile_pattern
from .registration import ArgumentRegistration, FlagRegistration, ParameterRegistration
from .utils import cast_to_type

__all__ = [
    "ArgumentRegistration",
    "CommandParser",
    "CompiledPattern",
    "FlagRegistration",
    "ParameterDescriptor",
    "ParameterRegistration",
    "ValueType",
    "cast_to_type",
    "compile_pattern",
]
