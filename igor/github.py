# Igor Org Tooling — (c) 2025 — MIT Licensed
"""github.py
A thin asynchronous GitHub REST client built on aiohttp.

Only the endpoints Igor commands use are wrapped. Every non-2xx response raises
`GithubError`; a 404 carries the message "Not Found". Connection failures and
timeouts raise `GithubError` without a status.
"""
from __future__ import annotations

import asyncio
from typing import Any

import aiohttp

from igor.config import GithubConfig
from igor.exceptions import GithubError
from igor.logger import logger

PER_PAGE = 100


class GithubClient:
    """
    GitHub client for a single organization.

    Args:
        config (GithubConfig): Token, username, org and API base URL.
        session (aiohttp.ClientSession | None): Session to reuse. When omitted a
            session is created lazily and closed by `close()`.
    """

    def __init__(
        self, config: GithubConfig, session: aiohttp.ClientSession | None = None
    ) -> None:
        self.config = config
        self._session = session
        self._owns_session = session is None

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"token {self.config.token}",
            "Accept": "application/vnd.github+json",
            "User-Agent": self.config.username or "igor",
        }

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession(headers=self.headers)
        return self._session

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        url = f"{self.config.api_url.rstrip('/')}{path}"
        logger.debug("[GithubClient] %s %s params=%s", method, url, params)
        session = self._get_session()
        try:
            async with session.request(
                method, url, params=params, json=json, headers=self.headers
            ) as response:
                if response.status == 404:
                    raise GithubError("Not Found", status=404)
                if response.status >= 400:
                    body = await response.text()
                    raise GithubError(
                        f"{method} {path} failed with status {response.status}: {body}",
                        status=response.status,
                    )
                if response.status == 204:
                    return None
                return await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as error:
            logger.debug("[GithubClient] %s %s failed: %r", method, url, error)
            reason = str(error) or type(error).__name__
            raise GithubError(f"{method} {path} failed: {reason}") from error

    async def _paginate(
        self, path: str, params: dict[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        results: list[dict[str, Any]] = []
        page = 1
        while True:
            batch = await self._request(
                "GET", path, params={**(params or {}), "per_page": PER_PAGE, "page": page}
            )
            results.extend(batch)
            if len(batch) < PER_PAGE:
                return results
            page += 1

    async def get_teams(self) -> list[dict[str, Any]]:
        return await self._paginate(f"/orgs/{self.config.org}/teams")

    async def get_team_members(
        self, team_slug: str, role: str = "all"
    ) -> list[dict[str, Any]]:
        return await self._paginate(
            f"/orgs/{self.config.org}/teams/{team_slug}/members", {"role": role}
        )

    async def get_all_members(self, role: str = "all") -> list[dict[str, Any]]:
        return await self._paginate(f"/orgs/{self.config.org}/members", {"role": role})

    async def get_repos(self, team_slug: str | None = None) -> list[dict[str, Any]]:
        if team_slug:
            path = f"/orgs/{self.config.org}/teams/{team_slug}/repos"
        else:
            path = f"/orgs/{self.config.org}/repos"
        repos = await self._paginate(path)
        return sorted(repos, key=lambda repo: repo["name"])

    async def add_team_member(
        self, team_slug: str, username: str, role: str = "member"
    ) -> dict[str, Any]:
        return await self._request(
            "PUT",
            f"/orgs/{self.config.org}/teams/{team_slug}/memberships/{username}",
            json={"role": role},
        )

    async def remove_team_member(self, team_slug: str, username: str) -> None:
        await self._request(
            "DELETE",
            f"/orgs/{self.config.org}/teams/{team_slug}/memberships/{username}",
        )

    async def get_latest_release(self, repo_name: str) -> dict[str, Any]:
        return await self._request(
            "GET", f"/repos/{self.config.org}/{repo_name}/releases/latest"
        )

    async def close(self) -> None:
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None

    def __str__(self) -> str:
        return f"GithubClient(org={self.config.org!r}, api_url={self.config.api_url!r})"
