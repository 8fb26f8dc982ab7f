import pytest

from igor.config import GithubConfig, IgorConfig
from igor.exceptions import GithubError


class FakeGithub:
    """In-memory stand-in for GithubClient."""

    def __init__(
        self,
        config=None,
        teams=None,
        members=None,
        repos=None,
        release=None,
        error=None,
        errors=None,
    ):
        self.config = config
        self.teams = teams if teams is not None else []
        self.members = members or {}
        self.repos = repos or {}
        self.release = release
        self.error = error
        self.errors = errors or {}
        self.calls = []
        self.closed = False

    def _record(self, *call):
        self.calls.append(call)
        if call[0] in self.errors:
            raise self.errors[call[0]]

    async def get_teams(self):
        self._record("get_teams")
        if self.error is not None:
            raise self.error
        return self.teams

    async def get_team_members(self, team_slug, role="all"):
        self._record("get_team_members", team_slug, role)
        return self.members.get((team_slug, role), [])

    async def get_all_members(self, role="all"):
        self._record("get_all_members", role)
        return self.members.get(("org", role), [])

    async def get_repos(self, team_slug=None):
        self._record("get_repos", team_slug)
        return self.repos.get(team_slug, [])

    async def add_team_member(self, team_slug, username, role="member"):
        self._record("add_team_member", team_slug, username, role)
        return {"state": "active", "role": role}

    async def remove_team_member(self, team_slug, username):
        self._record("remove_team_member", team_slug, username)

    async def get_latest_release(self, repo_name):
        self._record("get_latest_release", repo_name)
        if self.error is not None:
            raise self.error
        if self.release is None:
            raise GithubError("Not Found", status=404)
        return self.release

    async def close(self):
        self.closed = True


class RecordingSelector:
    """Stand-in for select_async; answers with a fixed value or a picker."""

    def __init__(self, answer=None, pick=None):
        self.answer = answer
        self.pick = pick
        self.calls = []

    async def __call__(self, message, choices):
        self.calls.append((message, choices))
        if self.pick is not None:
            return next(value for title, value in choices if title == self.pick)
        return self.answer


class RecordingConfirmer:
    def __init__(self, answer=True):
        self.answer = answer
        self.messages = []

    async def __call__(self, message):
        self.messages.append(message)
        return self.answer


@pytest.fixture
def igor_config():
    return IgorConfig(github=GithubConfig(token="t0k3n", username="octocat", org="acme"))


@pytest.fixture
def fake_github():
    return FakeGithub


@pytest.fixture
def selector():
    return RecordingSelector


@pytest.fixture
def confirmer():
    return RecordingConfirmer


def factory_for(github):
    def factory(config):
        github.config = config
        return github

    return factory


@pytest.fixture
def github_factory():
    return factory_for
