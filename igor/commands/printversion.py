# Igor Org Tooling — (c) 2025 — MIT Licensed
"""printversion command, also reached through `--version` / `-v`."""
from igor.command import Command
from igor.console import console
from igor.context import ExecutionContext
from igor.version import __version__


class PrintVersionCommand(Command):
    def __init__(self) -> None:
        super().__init__(
            pattern="<printversion>", docs="prints the installed version of Igor"
        )

    async def main(self, context: ExecutionContext) -> ExecutionContext:
        console.print(f"v{__version__}", style="gen")
        context.prevent_completion = True
        return context
