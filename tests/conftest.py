"""Shared test fixtures and sample data."""

import copy

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from unittest.mock import AsyncMock

from app.config import Settings
from app.main import create_app
from app.routers import gists, revisions
from app.services.github_client import GitHubClient

GIST_ID = "aa5a315d61ae9438b18d"

# Sample test data matching the GitHub API response for a single gist
SAMPLE_GIST_DATA = {
    "url": f"https://api.github.com/gists/{GIST_ID}",
    "forks_url": f"https://api.github.com/gists/{GIST_ID}/forks",
    "commits_url": f"https://api.github.com/gists/{GIST_ID}/commits",
    "id": GIST_ID,
    "node_id": "MDQ6R2lzdGFhNWEzMTVkNjFhZTk0MzhiMThk",
    "git_pull_url": f"https://gist.github.com/{GIST_ID}.git",
    "git_push_url": f"https://gist.github.com/{GIST_ID}.git",
    "html_url": f"https://gist.github.com/{GIST_ID}",
    "files": {
        "hello_world.rb": {
            "filename": "hello_world.rb",
            "type": "application/x-ruby",
            "language": "Ruby",
            "raw_url": f"https://gist.githubusercontent.com/octocat/{GIST_ID}/raw/hello_world.rb",
            "size": 167,
            "truncated": False,
            "content": "class HelloWorld\n  def initialize(name)\n  end\nend",
        }
    },
    "public": True,
    "created_at": "2010-04-14T02:15:15Z",
    "updated_at": "2011-06-20T11:34:15Z",
    "description": "Hello World Examples",
    "comments": 0,
    "user": None,
    "comments_url": f"https://api.github.com/gists/{GIST_ID}/comments",
    "owner": {
        "login": "octocat",
        "id": 1,
        "avatar_url": "https://github.com/images/error/octocat_happy.gif",
        "html_url": "https://github.com/octocat",
    },
    "forks": [],
    "history": [
        {
            "url": f"https://api.github.com/gists/{GIST_ID}/57a7f021",
            "version": "57a7f021a713b1c5a6a199b54cc514735d2d462f",
            "user": {"login": "octocat", "id": 1},
            "change_status": {"deletions": 0, "additions": 180, "total": 180},
            "committed_at": "2010-04-14T02:15:15Z",
        }
    ],
    "truncated": False,
}


def make_commit(version: str, committed_at: str = "2010-04-14T02:15:15Z") -> dict:
    """A commit history entry as GitHub returns it."""
    return {
        "url": f"https://api.github.com/gists/{GIST_ID}/{version}",
        "version": version,
        "user": {"login": "octocat", "id": 1},
        "change_status": {"deletions": 0, "additions": 180, "total": 180},
        "committed_at": committed_at,
    }


def make_revision(version: str, *filenames: str) -> dict:
    """A gist snapshot holding the given files."""
    revision = copy.deepcopy(SAMPLE_GIST_DATA)
    revision["url"] = f"https://api.github.com/gists/{GIST_ID}/{version}"
    revision["files"] = {
        name: {
            "filename": name,
            "type": "text/plain",
            "language": "Text",
            "raw_url": f"https://gist.githubusercontent.com/octocat/{GIST_ID}/raw/{version}/{name}",
            "size": 2,
            "truncated": False,
            "content": "hi",
        }
        for name in filenames
    }
    return revision


@pytest.fixture
def sample_gist_data():
    """Sample gist data for testing, safe to mutate."""
    return copy.deepcopy(SAMPLE_GIST_DATA)


@pytest.fixture
def sample_commits():
    """Three commit history entries, newest first."""
    return [make_commit("c3"), make_commit("c2"), make_commit("c1")]


@pytest.fixture
def mock_github_client(sample_gist_data, sample_commits):
    """Mocked GitHub client."""
    mock_client = AsyncMock(spec=GitHubClient)
    mock_client.get_gist.return_value = sample_gist_data
    mock_client.get_commits.return_value = sample_commits
    mock_client.get_revision.return_value = sample_gist_data
    mock_client.create_gist.return_value = sample_gist_data
    mock_client.update_gist.return_value = sample_gist_data
    mock_client.delete_gist.return_value = None
    return mock_client


def _asgi_client(app, mock_github_client):
    app.dependency_overrides[gists.get_github_client] = lambda: mock_github_client
    app.dependency_overrides[revisions.get_github_client] = lambda: mock_github_client
    return AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    )


@pytest_asyncio.fixture
async def test_client(mock_github_client):
    """AsyncClient for the default route table with a mocked GitHub client."""
    app = create_app(Settings())
    async with _asgi_client(app, mock_github_client) as client:
        yield client


@pytest_asyncio.fixture
async def revisions_client(mock_github_client):
    """AsyncClient for an app with the revision routes mounted."""
    app = create_app(Settings(expose_revision_routes=True))
    async with _asgi_client(app, mock_github_client) as client:
        yield client


@pytest.fixture
def gist_id():
    return GIST_ID


@pytest.fixture
def commit_factory():
    """Builds commit history entries."""
    return make_commit


@pytest.fixture
def revision_factory():
    """Builds gist snapshots holding the given files."""
    return make_revision
