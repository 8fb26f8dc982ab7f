# Igor Org Tooling — (c) 2025 — MIT Licensed
"""
Defines structural protocols for the collaborators Igor commands depend on.

Protocols:
- GithubProtocol: The subset of the GitHub API used by Igor commands.
- CompletionHook: Async callable run after a command completes.
"""
from __future__ import annotations

from typing import Any, Awaitable, Callable, Protocol, runtime_checkable

from igor.context import ExecutionContext


@runtime_checkable
class GithubProtocol(Protocol):
    async def get_teams(self) -> list[dict[str, Any]]: ...

    async def get_team_members(
        self, team_slug: str, role: str = "all"
    ) -> list[dict[str, Any]]: ...

    async def get_all_members(self, role: str = "all") -> list[dict[str, Any]]: ...

    async def get_repos(self, team_slug: str | None = None) -> list[dict[str, Any]]: ...

    async def add_team_member(
        self, team_slug: str, username: str, role: str = "member"
    ) -> dict[str, Any]: ...

    async def remove_team_member(self, team_slug: str, username: str) -> None: ...

    async def get_latest_release(self, repo_name: str) -> dict[str, Any]: ...

    async def close(self) -> None: ...


CompletionHook = Callable[[ExecutionContext], Awaitable[ExecutionContext]]
