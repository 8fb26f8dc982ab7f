# Igor Org Tooling — (c) 2025 — MIT Licensed
"""
Shared plumbing for commands that work on the organization's teams.

`TeamCommand` owns the GitHub client for the length of a run:

- before: checks the GitHub config, opens the client and loads the teams
- main: left to the concrete command
- execute: always closes the client, whichever stage raised

Context data written here:
- "github": the GitHub client
- "teams": every team of the organization
"""
from __future__ import annotations

from typing import Any, Awaitable, Callable, Sequence

from igor.command import Command
from igor.config import GithubConfig
from igor.console import console
from igor.context import ExecutionContext
from igor.exceptions import FatalError, GithubError
from igor.github import GithubClient
from igor.logger import logger
from igor.prompt_utils import confirm_async, select_async
from igor.protocols import GithubProtocol
from igor.signals import CancelSignal

Selector = Callable[[str, Sequence[tuple[str, Any]]], Awaitable[Any]]
Confirmer = Callable[[str], Awaitable[bool]]
GithubFactory = Callable[[GithubConfig], GithubProtocol]


def get_prompt_options(teams: list[dict[str, Any]]) -> list[tuple[str, dict[str, Any]]]:
    """Build `(title, team)` prompt choices, sorted by team name."""
    ordered = sorted(teams, key=lambda team: team["name"].lower())
    return [(team["name"], team) for team in ordered]


def summarize_team(team: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": team["id"],
        "name": team["name"].lower(),
        "slug": team.get("slug") or team["name"].lower(),
    }


def find_by_login(members: list[dict[str, Any]], login: str) -> dict[str, Any] | None:
    return next(
        (member for member in members if member["login"].lower() == login.lower()),
        None,
    )


class TeamCommand(Command):
    """
    Base class for commands that need the GitHub client and the team list.

    Args:
        pattern (str): Command pattern.
        docs (str | None): Help text.
        github_factory: Builds the GitHub client from the user's config.
        selector: Presents `(title, value)` choices and returns the chosen
            value, or None when the user cancels.
        confirmer: Asks a yes/no question.
        require_teams (bool): Fail in `before` when the org has no teams.
    """

    def __init__(
        self,
        pattern: str,
        docs: str | None = None,
        github_factory: GithubFactory = GithubClient,
        selector: Selector = select_async,
        confirmer: Confirmer = confirm_async,
        require_teams: bool = False,
    ) -> None:
        super().__init__(pattern=pattern, docs=docs)
        self.github_factory = github_factory
        self.selector = selector
        self.confirmer = confirmer
        self.require_teams = require_teams

    async def before(self, context: ExecutionContext) -> ExecutionContext:
        if context.config is None or context.config.github is None:
            raise FatalError(f"{self.name}:before error\n\nno github config found")

        console.print("initializing...", style="gen")
        github = self.github_factory(context.config.github)
        context.set("github", github)
        try:
            teams = await github.get_teams()
        except GithubError as error:
            raise FatalError(f"{self.name}:getTeams error\n\n{error}") from error
        if self.require_teams and not teams:
            raise FatalError(
                f"it appears you do not have access to any teams. {self.name} cancelled"
            )
        context.set("teams", teams)
        return context

    async def execute(self, context: ExecutionContext) -> ExecutionContext:
        try:
            return await super().execute(context)
        finally:
            github: GithubProtocol | None = context.get("github")
            if github is not None:
                await github.close()

    async def select(self, message: str, choices: Sequence[tuple[str, Any]]) -> Any:
        """Prompt for one of `choices`; cancelling raises `CancelSignal`."""
        selected = await self.selector(message, choices)
        if selected is None:
            raise CancelSignal(f"{self.name} cancelled")
        return selected

    async def resolve_team(
        self, context: ExecutionContext, prompt: str | None = None
    ) -> dict[str, Any] | None:
        """
        Resolve the `team` argument against the loaded teams.

        An exact (case-insensitive) name match wins. An unknown name always
        prompts. A missing name prompts with `prompt` when one is given, and
        resolves to None otherwise.
        """
        name = context.arguments.arguments.get("team")
        teams: list[dict[str, Any]] = context.get("teams", [])

        if name is not None:
            match = next(
                (team for team in teams if team["name"].lower() == name.lower()), None
            )
            if match is not None:
                return summarize_team(match)
            prompt = (
                f"\n{name} is not a valid team name.\nplease select a team from the "
                "list below (or press ctrl+C to cancel)"
            )
        elif prompt is None:
            return None

        logger.debug("[%s] prompting for a team (given: %r)", self.name, name)
        return summarize_team(await self.select(prompt, get_prompt_options(teams)))

    async def confirm(self, context: ExecutionContext, message: str) -> None:
        """Ask for confirmation unless the `yes` flag was given; 'n' cancels."""
        if context.arguments.flags.get("yes"):
            logger.debug("[%s] confirmation skipped", self.name)
            return
        if not await self.confirmer(message):
            raise CancelSignal(f"{self.name} cancelled")

    async def get_team_members(
        self, context: ExecutionContext, team: dict[str, Any]
    ) -> list[dict[str, Any]]:
        github: GithubProtocol = context.get("github")
        try:
            return await github.get_team_members(team["slug"])
        except GithubError as error:
            raise FatalError(f"{self.name}:getTeamMembers error\n\n{error}") from error

    async def select_member(self, message: str, members: list[dict[str, Any]]) -> str:
        """Prompt for one of `members` and return its lower-cased login."""
        options = [(member["login"], member["login"].lower()) for member in members]
        return await self.select(message, sorted(options, key=lambda option: option[1]))
