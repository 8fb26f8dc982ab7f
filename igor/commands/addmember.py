# Igor Org Tooling — (c) 2025 — MIT Licensed
"""addmember command

Adds an organization member to a team, as maintainer unless `--member` is
given. Missing or invalid team and username arguments are resolved by
prompting; the addition is confirmed unless `--yes` is given.
"""
from __future__ import annotations

from typing import Any

from igor.commands.team import TeamCommand, find_by_login
from igor.console import console
from igor.context import ExecutionContext
from igor.exceptions import FatalError, GithubError, NoResultsError
from igor.validators import is_github_login


class AddMemberCommand(TeamCommand):
    def __init__(self, **collaborators: Any) -> None:
        super().__init__(
            pattern="<addmember>",
            docs=(
                "adds a user to a team. requires org owner or team maintainer "
                "permissions"
            ),
            require_teams=True,
            **collaborators,
        )
        self.flag(
            "member|m",
            description=(
                "add this flag if you wish to restrict this user with member "
                "permissions on the team"
            ),
        )
        self.flag("yes|y", description="add the user without asking for confirmation")
        self.argument(
            "team|t",
            description=(
                "the team to add the user to. if not entered, you will be prompted "
                "with a list of all teams in the org"
            ),
        )
        self.argument(
            "username|u",
            validate=is_github_login,
            description=(
                "the user's github username. this user must already be a member "
                "of the organization"
            ),
        )

    async def before(self, context: ExecutionContext) -> ExecutionContext:
        context = await super().before(context)
        try:
            context.set("org_members", await context.get("github").get_all_members())
        except GithubError as error:
            raise FatalError(f"addmember:getAllMembers error\n\n{error}") from error
        return context

    async def resolve_user(
        self,
        context: ExecutionContext,
        team: dict[str, Any],
        team_members: list[dict[str, Any]],
    ) -> str:
        username = context.arguments.arguments.get("username")
        org_members: list[dict[str, Any]] = context.get("org_members", [])

        if username is not None:
            if find_by_login(org_members, username) is None:
                message = (
                    f"\n{username} is not a valid username.\nplease choose a username "
                    f"from the list below to add to {team['name']} (or press ctrl+C "
                    "to cancel)"
                )
            elif find_by_login(team_members, username) is not None:
                raise FatalError(
                    f"[-] {username} is already a member of {team['name']} - "
                    "addmember cancelled"
                )
            else:
                return username.lower()
        else:
            message = f"\nwho would you like to add to {team['name']}?"

        candidates = [
            member
            for member in org_members
            if find_by_login(team_members, member["login"]) is None
        ]
        if not candidates:
            raise NoResultsError(f"every org member already belongs to {team['name']}")
        return await self.select_member(message, candidates)

    async def main(self, context: ExecutionContext) -> ExecutionContext:
        team = await self.resolve_team(
            context, prompt="\nwhat team would you like to add a member to?"
        )
        context.set("team", team)
        team_members = await self.get_team_members(context, team)
        user = await self.resolve_user(context, team, team_members)
        context.set("user", user)

        role = "member" if context.arguments.flags.get("member") else "maintainer"
        await self.confirm(context, f"add {user} to {team['name']} as {role}?")

        console.print("adding member...", style="gen")
        try:
            result = await context.get("github").add_team_member(
                team["slug"], user, role=role
            )
        except GithubError as error:
            raise FatalError(f"addmember:addMember error\n\n{error}") from error
        context.set("results", result)

        console.print(
            f"\n[+] {user} added to {team['name']}\n", style="complete", markup=False
        )
        return context
