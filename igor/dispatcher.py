# Igor Org Tooling — (c) 2025 — MIT Licensed
"""
Resolves the top-level command and runs it.

The `Dispatcher` is the only place that turns the outcome of a command into a
process exit code:

- 0: the command completed, was cancelled by the user, or stopped with a
  reported but non-fatal error.
- 1: a fatal error (declaration, input, dispatch, config, GitHub, or any error
  explicitly tagged fatal), or an absent/unknown command.
- 130: interrupted with Ctrl-C.

After a command completes, the completion hook runs unless the context sets
`prevent_completion`.
"""
from __future__ import annotations

from igor.console import console
from igor.context import ExecutionContext
from igor.exceptions import DispatchError, IgorError
from igor.logger import logger
from igor.protocols import CompletionHook
from igor.registry import CommandRegistry
from igor.signals import CancelSignal

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_INTERRUPTED = 130


def report_error(error: BaseException) -> None:
    console.print(f"\n{error}\n", style="error", markup=False, highlight=False)


class Dispatcher:
    """
    Dispatches an execution context to the registered command.

    Args:
        registry (CommandRegistry): The commands available to this process.
        completion_hook (CompletionHook | None): Run after a successful command.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        completion_hook: CompletionHook | None = None,
    ) -> None:
        self.registry = registry
        self.completion_hook = completion_hook

    def resolve(self, command_name: str | None):
        """
        Look up the command for `command_name`.

        Raises:
            DispatchError: If the name is absent or not registered.
        """
        if command_name is None:
            raise DispatchError("invalid command - no command given")
        command = self.registry.resolve(command_name)
        if command is None:
            raise DispatchError(f"invalid command: {command_name}")
        return command

    async def run(self, context: ExecutionContext) -> ExecutionContext:
        """Run the command selected by `context.command`, then the completion hook."""
        command = self.resolve(context.command)
        context.registry = self.registry
        logger.info("Dispatching '%s' -> %s", context.command, command.name)
        context = await command.execute(context)
        if context.prevent_completion or self.completion_hook is None:
            return context
        return await self.completion_hook(context)

    async def dispatch(self, context: ExecutionContext) -> int:
        """
        Run the command and translate the outcome into an exit code.

        Returns:
            int: The process exit code.
        """
        try:
            await self.run(context)
        except CancelSignal as signal:
            logger.info("[CancelSignal] %s", signal)
            console.print(f"\n[!] {context.command} cancelled\n", style="warn")
            return EXIT_OK
        except KeyboardInterrupt:
            logger.info("[KeyboardInterrupt] <- Exiting '%s'.", context.command)
            return EXIT_INTERRUPTED
        except IgorError as error:
            logger.debug("'%s' failed (fatal=%s): %r", context.command, error.fatal, error)
            report_error(error)
            return EXIT_FATAL if error.fatal else EXIT_OK
        except Exception as error:
            logger.debug("'%s' raised an untagged error", context.command, exc_info=True)
            report_error(error)
            return EXIT_OK
        return EXIT_OK

    def __str__(self) -> str:
        return f"Dispatcher(registry={self.registry})"
