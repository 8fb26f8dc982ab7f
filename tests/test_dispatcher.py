import pytest

from igor.command import Command
from igor.context import ExecutionContext, build_context
from igor.dispatcher import Dispatcher
from igor.exceptions import DispatchError, FatalError, NoResultsError
from igor.registry import CommandRegistry
from igor.signals import CancelSignal


class StubCommand(Command):
    def __init__(self, name, error=None, prevent_completion=False):
        super().__init__(pattern=f"<{name}> <target?>")
        self.parameter("target")
        self.error = error
        self.prevent_completion = prevent_completion
        self.contexts = []

    async def main(self, context):
        self.contexts.append(context)
        if self.error is not None:
            raise self.error
        context.prevent_completion = self.prevent_completion
        return context


class CompletionRecorder:
    def __init__(self):
        self.calls = []

    async def __call__(self, context):
        self.calls.append(context)
        return context


def make_dispatcher(*commands):
    completion = CompletionRecorder()
    return Dispatcher(CommandRegistry(list(commands)), completion_hook=completion), completion


@pytest.mark.asyncio
async def test_successful_dispatch_runs_completion():
    command = StubCommand("deploy")
    dispatcher, completion = make_dispatcher(command)
    code = await dispatcher.dispatch(build_context(["igor", "deploy", "site"]))
    assert code == 0
    assert command.contexts[0].arguments.parameters == {"target": "site"}
    assert command.contexts[0].registry is dispatcher.registry
    assert len(completion.calls) == 1


@pytest.mark.asyncio
async def test_prevent_completion():
    dispatcher, completion = make_dispatcher(StubCommand("deploy", prevent_completion=True))
    assert await dispatcher.dispatch(build_context(["igor", "deploy"])) == 0
    assert completion.calls == []


@pytest.mark.asyncio
async def test_version_alias_dispatches_printversion():
    command = StubCommand("printversion")
    dispatcher, _ = make_dispatcher(command)
    assert await dispatcher.dispatch(build_context(["igor", "--version"])) == 0
    assert await dispatcher.dispatch(build_context(["igor", "-v"])) == 0
    assert len(command.contexts) == 2


@pytest.mark.asyncio
@pytest.mark.parametrize("argv", [["igor"], ["igor", "nope"], ["igor", "version"]])
async def test_invalid_command(argv, capsys):
    dispatcher, completion = make_dispatcher(StubCommand("deploy"))
    assert await dispatcher.dispatch(build_context(argv)) == 1
    assert "invalid command" in capsys.readouterr().out
    assert completion.calls == []


@pytest.mark.asyncio
async def test_resolve_raises_dispatch_error():
    dispatcher, _ = make_dispatcher(StubCommand("deploy"))
    with pytest.raises(DispatchError):
        dispatcher.resolve(None)
    with pytest.raises(DispatchError):
        await dispatcher.run(ExecutionContext(command="unknown"))


@pytest.mark.asyncio
async def test_fatal_error_exits_one(capsys):
    dispatcher, completion = make_dispatcher(
        StubCommand("deploy", error=FatalError("unauthorized user"))
    )
    assert await dispatcher.dispatch(build_context(["igor", "deploy"])) == 1
    assert "unauthorized user" in capsys.readouterr().out
    assert completion.calls == []


@pytest.mark.asyncio
async def test_parse_error_exits_one(capsys):
    dispatcher, _ = make_dispatcher(StubCommand("deploy"))
    assert await dispatcher.dispatch(build_context(["igor", "deploy", "a", "b"])) == 1
    assert "expected 1 parameters, but found 2" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_non_fatal_error_exits_zero(capsys):
    dispatcher, _ = make_dispatcher(
        StubCommand("deploy", error=NoResultsError("no repos found"))
    )
    assert await dispatcher.dispatch(build_context(["igor", "deploy"])) == 0
    assert "no repos found" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_fatal_marker_overrides_class_default():
    dispatcher, _ = make_dispatcher(
        StubCommand("deploy", error=NoResultsError("nothing", fatal=True))
    )
    assert await dispatcher.dispatch(build_context(["igor", "deploy"])) == 1


@pytest.mark.asyncio
async def test_untagged_error_exits_zero(capsys):
    dispatcher, _ = make_dispatcher(StubCommand("deploy", error=RuntimeError("boom")))
    assert await dispatcher.dispatch(build_context(["igor", "deploy"])) == 0
    assert "boom" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_cancel_signal_exits_zero(capsys):
    dispatcher, completion = make_dispatcher(
        StubCommand("deploy", error=CancelSignal("user cancelled"))
    )
    assert await dispatcher.dispatch(build_context(["igor", "deploy"])) == 0
    assert "deploy cancelled" in capsys.readouterr().out
    assert completion.calls == []


@pytest.mark.asyncio
async def test_keyboard_interrupt_exits_130():
    dispatcher, _ = make_dispatcher(StubCommand("deploy", error=KeyboardInterrupt()))
    assert await dispatcher.dispatch(build_context(["igor", "deploy"])) == 130


def test_build_context():
    context = build_context(["/usr/local/bin/igor", "listmembers", "-t", "design"])
    assert context.namespace == "igor"
    assert context.command == "listmembers"
    assert context.args == ["-t", "design"]


def test_build_context_without_command():
    context = build_context(["igor"])
    assert context.command is None
    assert context.args == []


def test_build_context_empty_argv():
    with pytest.raises(DispatchError):
        build_context([])


@pytest.mark.asyncio
async def test_crashing_validator_exits_one(capsys):
    command = StubCommand("deploy")
    command.argument("count|n", validate=lambda value: int(value) > 0)
    dispatcher, completion = make_dispatcher(command)
    assert await dispatcher.dispatch(build_context(["igor", "deploy", "-n", "abc"])) == 1
    assert command.contexts == []
    assert completion.calls == []
    assert "invalid literal" in capsys.readouterr().out
