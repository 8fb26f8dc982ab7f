# Igor Org Tooling — (c) 2025 — MIT Licensed
"""help command: general documentation, or delegation to a command's own help."""
from __future__ import annotations

from igor.command import Command
from igor.console import console
from igor.context import ExecutionContext
from igor.exceptions import FatalError
from igor.version import __version__


def print_general_docs(command_names: list[str]) -> None:
    """Print the tool version, how to get per-command help and the command list."""
    console.rule(style="gen")
    console.print("IGOR", style="title")
    console.print(f"v{__version__}\n", style="gen")

    console.print("COMMANDS:", style="gen")
    console.print(
        "* for further documentation of each command, use the command|c argument",
        style="gen",
    )
    console.print("igor help --command [commandName]", style="gen", markup=False)
    console.print("igor help -c [commandName]\n", style="gen", markup=False)

    for name in command_names:
        console.print(f"  {name}", style="title")
    console.rule(style="gen")


class HelpCommand(Command):
    def __init__(self) -> None:
        super().__init__(
            pattern="<help>",
            docs=(
                "prints help documentation for Igor. if a specific command is "
                "entered, documentation for that command will be printed, "
                "otherwise, general documentation will be printed, including a "
                "list of all available commands"
            ),
        )
        self.argument(
            "command|c", description="the command to print help documentation for"
        )

    async def main(self, context: ExecutionContext) -> ExecutionContext:
        name = context.arguments.arguments.get("command")
        registry = context.registry or {}

        if name is None:
            print_general_docs(list(registry))
        elif name in registry:
            registry[name].help()
        else:
            raise FatalError(
                f"help:main error\n\ninvalid command passed to help: {name}. \n"
                "enter 'igor help' for a list of available commands"
            )
        return context
