# Igor Org Tooling — (c) 2025 — MIT Licensed
"""listmembers command

Lists the members of a team, or of the whole organization when no team is
given. With `--admins`, only team maintainers (or org owners) are listed.

Context data written by this command:
- "team": the selected team, or None for the organization (main)
- "members": the listed members (main)
"""
from __future__ import annotations

from typing import Any

from igor.commands.team import TeamCommand
from igor.console import console
from igor.context import ExecutionContext
from igor.exceptions import FatalError, GithubError, NoResultsError
from igor.logger import logger
from igor.protocols import GithubProtocol


class ListMembersCommand(TeamCommand):
    def __init__(self, **collaborators: Any) -> None:
        super().__init__(
            pattern="<listmembers>",
            docs=(
                "lists all members of a specified group. if no group is "
                "specified, will default to organization"
            ),
            **collaborators,
        )
        self.flag(
            "admins|a",
            description=(
                "add this flag if you wish to only see a list of admins. if no "
                "team is specified, will retrieve all members with 'owner' "
                "permissions for the github org account. if a team is specified, "
                "will retrieve all members of the specified team that have "
                "'maintainer' permissions"
            ),
        )
        self.argument(
            "team|t",
            description=(
                "the team to list members of. if an invalid team is found, user "
                "will be prompted with a list of teams to choose from"
            ),
        )

    async def get_members(
        self, github: GithubProtocol, team: dict[str, Any] | None, admins: bool
    ) -> list[dict[str, Any]]:
        try:
            if team is not None:
                members = await github.get_team_members(
                    team["slug"], role="maintainer" if admins else "all"
                )
            else:
                members = await github.get_all_members(role="admin" if admins else "all")
        except GithubError as error:
            raise FatalError(f"listmembers:getMembers error\n\n{error}") from error

        if team is not None and not members:
            raise NoResultsError(f"no members are assigned to {team['name']}")
        return members

    async def main(self, context: ExecutionContext) -> ExecutionContext:
        admins = context.arguments.flags.get("admins", False)
        team = await self.resolve_team(context)
        context.set("team", team)
        members = await self.get_members(context.get("github"), team, admins)
        context.set("members", members)

        group = team["name"] if team else "org"
        if admins and team is None:
            message = "displaying all org members with owner permissions"
        elif admins:
            message = f"displaying all {group} members with maintainer permissions"
        else:
            message = f"displaying all {group} members"

        logger.debug("[listmembers] %d members for %s", len(members), group)
        console.print(f"\n{message}", style="complete")
        for member in members:
            console.print(f"\t- {member['login']}", style="gen", markup=False)
        console.print()
        return context
