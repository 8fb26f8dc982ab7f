# Igor Org Tooling — (c) 2025 — MIT Licensed
"""command.py

Defines the Command base class for Igor.

A Command owns a `CommandParser` built from its pattern and runs a fixed
three-stage lifecycle over the execution context:

    parse → before → main → after

Concrete commands subclass `Command`, declare their inputs in `__init__`
and override the stages they need. Every stage is a coroutine that receives the
context and returns it (possibly enriched) for the next stage. A stage that
raises aborts the remaining stages; the error propagates to the dispatcher,
which decides the exit code from the error's `fatal` marker.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from rich.padding import Padding
from rich.text import Text

from igor.console import console
from igor.context import ExecutionContext
from igor.exceptions import CommandArgumentError, IgorError
from igor.logger import logger
from igor.parser.command_parser import CommandParser


class LifecycleStage(Enum):
    """The stages of a command run, in execution order."""

    BEFORE = "before"
    MAIN = "main"
    AFTER = "after"

    def __str__(self) -> str:
        return self.value


class Command:
    """
    Base class for every Igor command.

    Attributes:
        name (str): The command name, taken from the first token of the pattern.
        parser (CommandParser): Declares and parses the command's input.
        docs (str | None): Documentation printed by `help()`.

    Methods:
        argument(), flag(), parameter(): Declare inputs (chainable).
        before(), main(), after(): Lifecycle stages; override as needed.
        execute(): Parse the context and run before → main → after.
        help(): Print the command's documentation.
    """

    def __init__(self, pattern: str, docs: str | None = None) -> None:
        self.parser = CommandParser(pattern)
        self.name: str = self.parser.command_name
        self.docs = docs

    def argument(self, name: str, **options: Any) -> Command:
        self.parser.argument(name, **options)
        return self

    def flag(self, name: str, **options: Any) -> Command:
        self.parser.flag(name, **options)
        return self

    def parameter(self, name: str, **options: Any) -> Command:
        self.parser.parameter(name, **options)
        return self

    async def before(self, context: ExecutionContext) -> ExecutionContext:
        return context

    async def main(self, context: ExecutionContext) -> ExecutionContext:
        logger.warning("[%s] Command.main has not been overridden.", self.name)
        return context

    async def after(self, context: ExecutionContext) -> ExecutionContext:
        return context

    async def execute(self, context: ExecutionContext) -> ExecutionContext:
        """
        Run the full lifecycle against `context`.

        Input errors abort the run before any stage starts. An unexpected error
        raised while parsing (e.g. by a validator) is re-raised as a
        `CommandArgumentError`, so it is always fatal.

        Returns:
            ExecutionContext: The context as returned by `after`.
        """
        context.start_timer()
        try:
            context = self.parser.parse(context)
        except IgorError as error:
            logger.debug("[%s] Input rejected: %s", self.name, error)
            raise
        except Exception as error:
            logger.debug("[%s] Parsing failed", self.name, exc_info=True)
            raise CommandArgumentError(f"{self.name}: {error}") from error

        try:
            for stage, handler in (
                (LifecycleStage.BEFORE, self.before),
                (LifecycleStage.MAIN, self.main),
                (LifecycleStage.AFTER, self.after),
            ):
                logger.debug("[%s] Entering '%s'.", self.name, stage)
                context = await handler(context)
        finally:
            context.stop_timer()
            logger.debug(context.to_log_line())
        return context

    def help(self) -> None:
        """Print the command's documentation."""
        if self.docs is None:
            logger.warning("[%s] no documentation has been written for this command", self.name)
            return

        parser = self.parser
        console.rule(style="gen")
        console.print(self.name, style="title")
        console.print(Padding(self.docs.strip(), (0, 0, 1, 2)), style="gen")

        if parser.parameters:
            console.print("parameters (listed in the order they must be entered):", style="gen")
            for descriptor in parser.pattern.parameters:
                registration = parser.parameters.get(descriptor.name)
                if registration is None:
                    continue
                optional = "" if descriptor.required else " [optional]"
                console.print(
                    Text(f"    {descriptor.name} <{registration.type}>{optional}", style="title")
                )
                console.print(Text(f"    {registration.description}\n", style="gen"))

        if parser.arguments:
            console.print("arguments:", style="gen")
            for registration in parser.arguments.values():
                identifiers = "|".join(registration.tokens)
                console.print(
                    Text(f"    {identifiers} <{registration.type}>", style="title")
                )
                console.print(Text(f"    {registration.description}\n", style="gen"))

        if parser.flags:
            console.print("flags:", style="gen")
            for registration in parser.flags.values():
                console.print(Text(f"    {'|'.join(registration.tokens)}", style="title"))
                console.print(Text(f"    {registration.description}\n", style="gen"))

        console.rule(style="gen")

    def __str__(self) -> str:
        return f"Command(name={self.name!r}, parser={self.parser})"
