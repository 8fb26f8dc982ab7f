# Igor Org Tooling — (c) 2025 — MIT Licensed
"""
Post-completion hook for Igor.

After a command finishes, the dispatcher runs a completion hook unless the
context sets `prevent_completion`. The default hook, `VersionCheck`, compares
the local Igor version with the latest release on GitHub:

- behind: prints update instructions
- ahead: occasionally prints an encouraging note
- current: prints nothing
"""
from __future__ import annotations

import random
from enum import Enum
from typing import Callable

from rich.align import Align

from igor.config import GithubConfig
from igor.console import console
from igor.context import ExecutionContext
from igor.exceptions import GithubError
from igor.github import GithubClient
from igor.logger import logger
from igor.protocols import GithubProtocol
from igor.version import __version__

MAX_MESSAGE_WIDTH = 80
ENCOURAGEMENT_RANGE = 100
RELEASE_REPO = "igor"


class VersionStatus(Enum):
    BEHIND = -1
    CURRENT = 0
    AHEAD = 1


def parse_version(version: str) -> tuple[int, ...]:
    """Turn 'v1.2.3' into (1, 2, 3). Non-numeric parts count as 0."""
    parts = version.strip().lstrip("vV").split(".")
    return tuple(int(part) if part.isdigit() else 0 for part in parts)


def compare_versions(local: str, latest: str) -> VersionStatus:
    local_parts, latest_parts = parse_version(local), parse_version(latest)
    if local_parts < latest_parts:
        return VersionStatus.BEHIND
    if local_parts == latest_parts:
        return VersionStatus.CURRENT
    return VersionStatus.AHEAD


def display_outdated_messaging(local: str, latest: str) -> None:
    border = "*" * MAX_MESSAGE_WIDTH
    console.print(f"\n{border}\n", style="warn")
    console.print(Align.center("your version of igor is outdated", width=MAX_MESSAGE_WIDTH), style="title")
    console.print(
        Align.center(f"follow these instructions to update {local} => {latest}\n", width=MAX_MESSAGE_WIDTH),
        style="title",
    )
    for instruction in (
        "- traverse into your local igor directory",
        "- run: 'git pull'",
        "- run: 'pip install -e .'",
    ):
        console.print(f"\t{instruction}", style="gen")
    console.print(f"\n{border}\n", style="warn")


def display_newer_version_messaging(local: str, rand: Callable[[int], int] | None = None) -> None:
    messages = [
        "look at you building new stuff! keep up the good work!!!",
        "awww yeah, lookin forward to seein what you're buildin!",
        "keep up the awesome work!!!",
        f"dang, {local}! look at you advancing the team!",
        "love seeing you contribute!!! keep it up!",
        "you're doin great!!!",
    ]
    roll = (rand or (lambda upper: random.randrange(upper)))(ENCOURAGEMENT_RANGE)
    if roll >= len(messages):
        return
    border = "*" * MAX_MESSAGE_WIDTH
    console.print(f"\n{border}\n", style="warn")
    console.print(Align.center(messages[roll], width=MAX_MESSAGE_WIDTH), style="gen")
    console.print(f"\n{border}\n", style="warn")


class VersionCheck:
    """
    Completion hook that checks the local version against the latest release.

    Args:
        github_factory (Callable[[GithubConfig], GithubProtocol]): Builds the
            GitHub client from the user's config.
        local_version (str): Version to compare; defaults to the installed one.
    """

    def __init__(
        self,
        github_factory: Callable[[GithubConfig], GithubProtocol] = GithubClient,
        local_version: str = __version__,
    ) -> None:
        self.github_factory = github_factory
        self.local_version = local_version

    @property
    def __name__(self):
        return "VersionCheck"

    async def __call__(self, context: ExecutionContext) -> ExecutionContext:
        if context.config is None or context.config.github is None:
            logger.debug("No GitHub config available; skipping version check.")
            return context

        github = self.github_factory(context.config.github)
        try:
            release = await github.get_latest_release(RELEASE_REPO)
        except GithubError as error:
            if error.status == 404:
                logger.warning("No versions found for '%s'.", RELEASE_REPO)
            else:
                logger.warning("Failed to get latest version of igor: %s", error)
            return context
        finally:
            await github.close()

        latest = release.get("tag_name", "")
        local = f"v{self.local_version.lstrip('v')}"
        latest = f"v{latest.lstrip('v')}"
        status = compare_versions(local, latest)
        logger.debug("Version check: local=%s latest=%s status=%s", local, latest, status)
        if status is VersionStatus.BEHIND:
            display_outdated_messaging(local, latest)
        elif status is VersionStatus.AHEAD:
            display_newer_version_messaging(local)
        return context
