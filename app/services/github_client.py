"""Async GitHub Gists API client using httpx."""

import logging
from typing import Any

import httpx

from app.config import Settings
from app.exceptions import GistNotFoundError, GitHubAPIError

logger = logging.getLogger(__name__)


class GitHubClient:
    """Async client for the GitHub Gists API."""

    def __init__(self, settings: Settings):
        self._base_url = settings.github_api_base_url
        self._api_version = settings.github_api_version
        self._token = settings.github_token
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "GitHubClient":
        await self.start()
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def start(self) -> None:
        """Initialize the HTTP client."""
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": self._api_version,
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"

        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers=headers,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def get_gist(self, gist_id: str) -> dict[str, Any]:
        """Fetch a single gist."""
        return await self._request(
            "GET", f"/gists/{gist_id}", gist_id=gist_id, expect=dict
        )

    async def create_gist(
        self,
        filename: str,
        content: str,
        description: str | None = None,
        public: bool = False,
    ) -> dict[str, Any]:
        """
        Create a gist holding a single file.

        Args:
            filename: Name of the file inside the new gist
            content: File content
            description: Optional gist description
            public: Whether the gist is publicly listed

        Returns:
            The raw GitHub representation of the created gist

        Raises:
            GitHubAPIError: For any failure, including a 404 from GitHub
        """
        payload: dict[str, Any] = {
            "public": public,
            "files": {filename: {"content": content}},
        }
        if description is not None:
            payload["description"] = description

        return await self._request("POST", "/gists", expect=dict, json=payload)

    async def update_gist(
        self,
        gist_id: str,
        filename: str,
        content: str,
    ) -> dict[str, Any]:
        """Create or overwrite one file of an existing gist."""
        return await self._request(
            "PATCH",
            f"/gists/{gist_id}",
            gist_id=gist_id,
            json={"files": {filename: {"content": content}}},
        )

    async def delete_gist(self, gist_id: str) -> None:
        """Delete a gist."""
        await self._request("DELETE", f"/gists/{gist_id}", gist_id=gist_id)

    async def get_commits(
        self,
        gist_id: str,
        page: int | float | None = None,
        per_page: int | float | None = None,
    ) -> list[dict[str, Any]]:
        """
        Fetch one page of a gist's commit history, newest first.

        Pagination values are forwarded untouched; ``None`` leaves the
        parameter out so GitHub applies its own default.
        """
        params = {
            key: value
            for key, value in (("page", page), ("per_page", per_page))
            if value is not None
        }
        commits = await self._request(
            "GET",
            f"/gists/{gist_id}/commits",
            gist_id=gist_id,
            expect=list,
            params=params,
        )
        if not all(isinstance(commit, dict) and "version" in commit for commit in commits):
            raise _malformed("commit entry without a version")
        return commits

    async def get_revision(self, gist_id: str, sha: str) -> dict[str, Any]:
        """Fetch the full gist as it was at revision ``sha``."""
        return await self._request(
            "GET", f"/gists/{gist_id}/{sha}", gist_id=gist_id, expect=dict
        )

    async def _request(
        self,
        method: str,
        path: str,
        gist_id: str | None = None,
        expect: type | None = None,
        **kwargs: Any,
    ) -> Any:
        """
        Send exactly one request to GitHub and decode the JSON reply.

        A 404 becomes GistNotFoundError when the call addresses an existing
        gist (``gist_id`` given); every other failure becomes GitHubAPIError,
        including a decoded body that is not of the ``expect``ed type.
        Nothing is retried.
        """
        if not self._client:
            raise RuntimeError("Client not initialized. Call start() first.")

        logger.debug(f"{method} {path}")

        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.TimeoutException:
            raise GitHubAPIError(
                status_code=504,
                message="GitHub API request timed out",
            )
        except httpx.RequestError as e:
            raise GitHubAPIError(
                status_code=502,
                message=f"Failed to connect to GitHub API: {str(e)}",
            )

        if response.status_code == 404 and gist_id is not None:
            raise GistNotFoundError(gist_id)

        if not 200 <= response.status_code < 300:
            raise GitHubAPIError(
                status_code=response.status_code,
                message=response.text,
            )

        data = None
        if response.status_code != 204 and response.content:
            try:
                data = response.json()
            except ValueError as e:
                raise _malformed(str(e))

        if expect is not None and not isinstance(data, expect):
            raise _malformed(
                f"expected {expect.__name__}, got {type(data).__name__}"
            )
        return data


def _malformed(detail: str) -> GitHubAPIError:
    return GitHubAPIError(
        status_code=502,
        message=f"Malformed response from GitHub API: {detail}",
    )
