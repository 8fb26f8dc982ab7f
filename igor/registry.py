# Igor Org Tooling — (c) 2025 — MIT Licensed
"""
Provides `CommandRegistry`, the fixed table of commands Igor can dispatch to.

The registry is built once at start-up from a list of `Command` instances and
is read-only afterwards. It is handed to the dispatcher explicitly, and the
dispatcher places it on the execution context for commands (such as `help`)
that need to look up other commands.

Example:
    registry = CommandRegistry([HelpCommand(), PrintVersionCommand()])
    registry["help"].help()
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from igor.command import Command
from igor.exceptions import CommandDeclarationError

VERSION_ALIASES = frozenset({"--version", "-v"})
VERSION_COMMAND = "printversion"


class CommandRegistry(Mapping[str, Command]):
    """Immutable mapping of command name to `Command`."""

    def __init__(self, commands: list[Command]) -> None:
        table: dict[str, Command] = {}
        for command in commands:
            if not command.name:
                raise CommandDeclarationError(f"command {command} has no name")
            if command.name in table:
                raise CommandDeclarationError(
                    f"command '{command.name}' is already registered"
                )
            table[command.name] = command
        self._commands = MappingProxyType(table)

    def __getitem__(self, name: str) -> Command:
        return self._commands[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def resolve(self, name: str | None) -> Command | None:
        """Return the command for `name`, treating `--version`/`-v` as `printversion`."""
        if name is None:
            return None
        if name in VERSION_ALIASES:
            name = VERSION_COMMAND
        return self._commands.get(name)

    def __str__(self) -> str:
        return f"CommandRegistry({', '.join(self._commands)})"
