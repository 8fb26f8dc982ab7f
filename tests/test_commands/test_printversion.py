import pytest

from igor.commands.printversion import PrintVersionCommand
from igor.context import ExecutionContext
from igor.version import __version__


@pytest.mark.asyncio
async def test_prints_version_and_skips_completion(capsys):
    context = ExecutionContext(command="printversion")
    result = await PrintVersionCommand().execute(context)
    assert f"v{__version__}" in capsys.readouterr().out
    assert result.prevent_completion


@pytest.mark.asyncio
async def test_rejects_parameters():
    from igor.exceptions import TooManyParametersError

    with pytest.raises(TooManyParametersError):
        await PrintVersionCommand().execute(
            ExecutionContext(command="printversion", args=["extra"])
        )
