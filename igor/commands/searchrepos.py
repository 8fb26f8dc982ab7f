# Igor Org Tooling — (c) 2025 — MIT Licensed
"""searchrepos command

Searches the organization's repositories (or one team's) for names containing
a query and lists the matches. The number of listed repos is capped by
`--limit`, falling back to `maxReposToShow` from the config.
"""
from __future__ import annotations

from typing import Any

from rich.table import Table

from igor.commands.team import TeamCommand
from igor.console import console
from igor.context import ExecutionContext
from igor.exceptions import FatalError, GithubError, NoResultsError
from igor.validators import is_positive


def search_repos(repos: list[dict[str, Any]], query: str) -> list[dict[str, Any]]:
    """Repos whose name contains `query`, case-insensitively."""
    return [repo for repo in repos if query in repo["name"].lower()]


class SearchReposCommand(TeamCommand):
    def __init__(self, **collaborators: Any) -> None:
        super().__init__(
            pattern="<searchrepos> <query?>",
            docs=(
                "searches for repos by substring. will list all repo names that "
                "contain <query>. if <query> is not included, all repos are listed.\n\n"
                "at most maxReposToShow repos (10 unless changed in your igor "
                "config) are listed at once. if more are found, you will be asked "
                "to refine your search"
            ),
            require_teams=True,
            **collaborators,
        )
        self.parameter("query", description="if provided, the substring to search for")
        self.argument(
            "team|t",
            description=(
                "if provided, search will be limited to the specified team's repos. "
                "if the team name is invalid, you will be prompted with a list of "
                "available teams"
            ),
        )
        self.argument(
            "limit|l",
            type="int",
            validate=is_positive,
            description="the most repos to list, overriding config.maxReposToShow",
        )
        self.flag(
            "all|a",
            description="ignore the repo limit and list every matching repo",
        )

    async def before(self, context: ExecutionContext) -> ExecutionContext:
        context = await super().before(context)
        console.print("searching...", style="gen")
        query = context.arguments.parameters.get("query")
        if query is None:
            console.print("[!] - no query term included with search", style="warn")
            query = ""
        context.set("query", query.lower())
        return context

    def get_limit(self, context: ExecutionContext) -> int:
        limit = context.arguments.arguments.get("limit")
        if limit is not None:
            return limit
        return context.config.max_repos_to_show

    async def main(self, context: ExecutionContext) -> ExecutionContext:
        team = await self.resolve_team(context)
        context.set("team", team)
        try:
            repos = await context.get("github").get_repos(
                team_slug=team["slug"] if team else None
            )
        except GithubError as error:
            raise FatalError(
                f"searchrepos:getRepos error\n\nFailed to retrieve repos\n{error}"
            ) from error

        query = context.get("query")
        results = search_repos(repos, query)
        context.set("results", results)
        if not results:
            raise NoResultsError(f"no repos found for query: {query}")

        limit = self.get_limit(context)
        if not context.arguments.flags.get("all") and len(results) > limit:
            console.print(
                f"{len(results)} results found. please refine your search and try again.",
                style="error",
            )
            return context

        table = Table(show_header=False, box=None)
        for repo in results:
            table.add_row(f"[title]{repo['name']}[/]", repo.get("clone_url", ""))
        console.print(f"\n{len(results)} repos found", style="complete")
        console.print(table)
        return context
