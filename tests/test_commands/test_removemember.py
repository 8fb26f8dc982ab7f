import pytest

from igor.commands.removemember import RemoveMemberCommand
from igor.context import ExecutionContext
from igor.exceptions import FatalError
from igor.signals import CancelSignal

TEAMS = [{"id": 2, "name": "Design", "slug": "design"}]
MEMBERS = {("design", "all"): [{"login": "Grace"}, {"login": "linus"}]}


def make_context(config, *args):
    return ExecutionContext(command="removemember", args=list(args), config=config)


def make_command(github, github_factory, prompts, confirmation):
    return RemoveMemberCommand(
        github_factory=github_factory(github), selector=prompts, confirmer=confirmation
    )


@pytest.mark.asyncio
async def test_removes_member(fake_github, github_factory, selector, confirmer, igor_config, capsys):
    github = fake_github(teams=TEAMS, members=MEMBERS)
    confirmation = confirmer()
    command = make_command(github, github_factory, selector(), confirmation)

    await command.execute(make_context(igor_config, "-t", "design", "-u", "grace"))

    assert ("remove_team_member", "design", "grace") in github.calls
    assert confirmation.messages == ["remove grace from design?"]
    assert "[+] grace removed from design" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_unknown_user_prompts_from_team(fake_github, github_factory, selector, confirmer, igor_config):
    github = fake_github(teams=TEAMS, members=MEMBERS)
    prompts = selector(pick="linus")
    command = make_command(github, github_factory, prompts, confirmer())

    await command.execute(make_context(igor_config, "-t", "design", "-u", "ada", "--yes"))

    message, choices = prompts.calls[0]
    assert "ada is not listed as a member of design" in message
    assert [title for title, _ in choices] == ["Grace", "linus"]
    assert ("remove_team_member", "design", "linus") in github.calls


@pytest.mark.asyncio
async def test_empty_team_is_fatal(fake_github, github_factory, selector, confirmer, igor_config):
    github = fake_github(teams=TEAMS, members={})
    command = make_command(github, github_factory, selector(), confirmer())
    with pytest.raises(FatalError, match="there are no users assigned to team: design"):
        await command.execute(make_context(igor_config, "-t", "design"))


@pytest.mark.asyncio
async def test_declined_confirmation(fake_github, github_factory, selector, confirmer, igor_config):
    github = fake_github(teams=TEAMS, members=MEMBERS)
    command = make_command(github, github_factory, selector(), confirmer(answer=False))
    with pytest.raises(CancelSignal):
        await command.execute(make_context(igor_config, "-t", "design", "-u", "linus"))
    assert not [call for call in github.calls if call[0] == "remove_team_member"]
    assert github.closed
