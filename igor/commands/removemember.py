# Igor Org Tooling — (c) 2025 — MIT Licensed
"""removemember command

Removes a user from a team. Missing or invalid team and username arguments are
resolved by prompting; the removal is confirmed unless `--yes` is given.
"""
from __future__ import annotations

from typing import Any

from igor.commands.team import TeamCommand, find_by_login
from igor.console import console
from igor.context import ExecutionContext
from igor.exceptions import FatalError, GithubError
from igor.validators import is_github_login


class RemoveMemberCommand(TeamCommand):
    def __init__(self, **collaborators: Any) -> None:
        super().__init__(
            pattern="<removemember>",
            docs=(
                "removes a user from a team. requires org owner or team maintainer "
                "permissions"
            ),
            require_teams=True,
            **collaborators,
        )
        self.flag("yes|y", description="remove the user without asking for confirmation")
        self.argument(
            "team|t",
            description=(
                "the team to remove the member from. if not entered, you will be "
                "prompted with a list of teams in the org"
            ),
        )
        self.argument(
            "username|u",
            validate=is_github_login,
            description=(
                "the user's github username. this user must be a member of the "
                "requested team. if not entered, you will be prompted with a list "
                "of the team's members"
            ),
        )

    async def resolve_user(
        self,
        context: ExecutionContext,
        team: dict[str, Any],
        members: list[dict[str, Any]],
    ) -> str:
        username = context.arguments.arguments.get("username")
        if username is None:
            message = f"\nwho would you like to remove from {team['name']}?"
        else:
            member = find_by_login(members, username)
            if member is not None:
                return member["login"].lower()
            message = (
                f"\n{username} is not listed as a member of {team['name']}.\nplease "
                "choose a user from the list below (or press ctrl+C to cancel)"
            )
        return await self.select_member(message, members)

    async def main(self, context: ExecutionContext) -> ExecutionContext:
        team = await self.resolve_team(
            context, prompt="\nwhat team would you like to remove a member from?"
        )
        context.set("team", team)
        members = await self.get_team_members(context, team)
        if not members:
            raise FatalError(f"[-] there are no users assigned to team: {team['name']}")

        user = await self.resolve_user(context, team, members)
        context.set("user", user)
        await self.confirm(context, f"remove {user} from {team['name']}?")

        try:
            await context.get("github").remove_team_member(team["slug"], user)
        except GithubError as error:
            raise FatalError(f"removemember:removeMember error\n\n{error}") from error

        console.print(
            f"\n[+] {user} removed from {team['name']}\n", style="complete", markup=False
        )
        return context
