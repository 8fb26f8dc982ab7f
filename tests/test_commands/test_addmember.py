import pytest

from igor.commands.addmember import AddMemberCommand
from igor.context import ExecutionContext
from igor.exceptions import FatalError, GithubError, NoResultsError, ValidationError
from igor.signals import CancelSignal

TEAMS = [
    {"id": 2, "name": "Design", "slug": "design"},
    {"id": 1, "name": "backend", "slug": "backend"},
]
MEMBERS = {
    ("org", "all"): [{"login": "Ada"}, {"login": "grace"}, {"login": "linus"}],
    ("design", "all"): [{"login": "grace"}],
}


def make_context(config, *args):
    return ExecutionContext(command="addmember", args=list(args), config=config)


@pytest.fixture
def github(fake_github):
    return fake_github(teams=TEAMS, members=MEMBERS)


@pytest.fixture
def build(github, github_factory, selector, confirmer):
    def build(answer=None, pick=None, confirmed=True):
        prompts = selector(answer=answer, pick=pick)
        confirmation = confirmer(answer=confirmed)
        command = AddMemberCommand(
            github_factory=github_factory(github),
            selector=prompts,
            confirmer=confirmation,
        )
        return command, prompts, confirmation

    return build


@pytest.mark.asyncio
async def test_adds_maintainer_after_confirmation(build, github, igor_config, capsys):
    command, prompts, confirmation = build()
    result = await command.execute(make_context(igor_config, "-t", "design", "-u", "ADA"))

    assert ("add_team_member", "design", "ada", "maintainer") in github.calls
    assert confirmation.messages == ["add ada to design as maintainer?"]
    assert prompts.calls == []
    assert result.get("user") == "ada"
    assert "[+] ada added to design" in capsys.readouterr().out
    assert github.closed


@pytest.mark.asyncio
async def test_member_flag_and_yes_skip_confirmation(build, github, igor_config):
    command, _, confirmation = build()
    await command.execute(make_context(igor_config, "-t", "design", "-u", "ada", "-m", "-y"))

    assert ("add_team_member", "design", "ada", "member") in github.calls
    assert confirmation.messages == []


@pytest.mark.asyncio
async def test_prompts_for_team_and_user(build, github, igor_config):
    command, _, _ = build()
    answers = iter([TEAMS[1], "linus"])
    messages = []

    async def answer(message, choices):
        messages.append(message)
        return next(answers)

    command.selector = answer
    await command.execute(make_context(igor_config))

    assert "what team would you like to add a member to?" in messages[0]
    assert "who would you like to add to backend?" in messages[1]
    assert ("add_team_member", "backend", "linus", "maintainer") in github.calls


@pytest.mark.asyncio
async def test_unknown_user_offers_members_not_on_team(build, github, igor_config):
    command, prompts, _ = build(pick="linus")
    await command.execute(make_context(igor_config, "-t", "design", "-u", "octocat"))

    message, choices = prompts.calls[0]
    assert "octocat is not a valid username" in message
    assert [title for title, _ in choices] == ["Ada", "linus"]
    assert ("add_team_member", "design", "linus", "maintainer") in github.calls


@pytest.mark.asyncio
async def test_existing_team_member_is_fatal(build, github, igor_config):
    command, _, _ = build()
    with pytest.raises(FatalError, match="grace is already a member of design"):
        await command.execute(make_context(igor_config, "-t", "design", "-u", "grace"))
    assert not [call for call in github.calls if call[0] == "add_team_member"]


@pytest.mark.asyncio
async def test_declined_confirmation_cancels(build, github, igor_config):
    command, _, _ = build(confirmed=False)
    with pytest.raises(CancelSignal):
        await command.execute(make_context(igor_config, "-t", "design", "-u", "ada"))
    assert not [call for call in github.calls if call[0] == "add_team_member"]
    assert github.closed


@pytest.mark.asyncio
async def test_cancelled_team_prompt(build, igor_config):
    command, _, _ = build(answer=None)
    with pytest.raises(CancelSignal):
        await command.execute(make_context(igor_config, "-u", "ada"))


@pytest.mark.asyncio
async def test_everyone_already_on_team(fake_github, github_factory, selector, confirmer, igor_config):
    github = fake_github(
        teams=TEAMS,
        members={("org", "all"): [{"login": "grace"}], ("design", "all"): [{"login": "grace"}]},
    )
    command = AddMemberCommand(
        github_factory=github_factory(github), selector=selector(), confirmer=confirmer()
    )
    with pytest.raises(NoResultsError):
        await command.execute(make_context(igor_config, "-t", "design"))


@pytest.mark.asyncio
async def test_username_is_validated(build, github, igor_config):
    command, _, _ = build()
    with pytest.raises(ValidationError, match="username failed validation"):
        await command.execute(make_context(igor_config, "-u", "not a login"))
    assert github.calls == []


@pytest.mark.asyncio
async def test_api_failure_is_fatal(fake_github, github_factory, selector, confirmer, igor_config):
    github = fake_github(
        teams=TEAMS,
        members=MEMBERS,
        errors={"add_team_member": GithubError("Forbidden", status=403)},
    )
    command = AddMemberCommand(
        github_factory=github_factory(github), selector=selector(), confirmer=confirmer()
    )
    with pytest.raises(FatalError, match="addmember:addMember error"):
        await command.execute(make_context(igor_config, "-t", "design", "-u", "ada", "-y"))
    assert github.closed
