# Igor Org Tooling — (c) 2025 — MIT Licensed
"""
Compiles a command's invocation pattern into parameter descriptors.

A pattern names the command followed by its positional parameters, in the
order they must be entered:

    "<deleterepo> <query?>"
    "<greet> <name> <times?>"

A trailing `?` marks a parameter optional. Once an optional parameter appears,
every later parameter must be optional as well.
"""
from __future__ import annotations

from dataclasses import dataclass

from igor.exceptions import PatternOrderError


@dataclass(frozen=True)
class ParameterDescriptor:
    """A positional slot in a command pattern."""

    name: str
    required: bool = True


@dataclass(frozen=True)
class CompiledPattern:
    """The command name and ordered parameter descriptors of a pattern."""

    command_name: str
    parameters: tuple[ParameterDescriptor, ...] = ()

    def get(self, name: str) -> ParameterDescriptor | None:
        return next((param for param in self.parameters if param.name == name), None)

    def __contains__(self, name: object) -> bool:
        return any(param.name == name for param in self.parameters)


def _strip_brackets(token: str) -> str:
    return token.replace("<", "").replace(">", "")


def compile_pattern(pattern: str) -> CompiledPattern:
    """
    Parse a pattern string into a `CompiledPattern`.

    Args:
        pattern (str): e.g. "<cmd> <a> <b?>".

    Raises:
        PatternOrderError: If a required parameter follows an optional one.
    """
    tokens = pattern.split()
    if not tokens:
        return CompiledPattern(command_name="")

    command_name = _strip_brackets(tokens[0])
    descriptors: list[ParameterDescriptor] = []
    optional_found = False
    for token in tokens[1:]:
        name = _strip_brackets(token)
        if "?" in name:
            optional_found = True
            descriptors.append(ParameterDescriptor(name.replace("?", ""), required=False))
        elif optional_found:
            raise PatternOrderError(
                f"required parameter '{name}' cannot be after optional parameter"
            )
        else:
            descriptors.append(ParameterDescriptor(name, required=True))

    return CompiledPattern(command_name=command_name, parameters=tuple(descriptors))
