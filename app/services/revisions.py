"""List the commits of a gist whose snapshot contains a given file."""

import asyncio
import logging
from typing import Any

from app.services.github_client import GitHubClient
from app.services.sanitizer import sanitize_commit_entry

logger = logging.getLogger(__name__)


async def get_revisions_for_file(
    github_client: GitHubClient,
    gist_id: str,
    filename: str,
    page: int | float | None = None,
    per_page: int | float | None = None,
) -> list[dict[str, Any]]:
    """
    Return the history entries of one commit page whose revision has ``filename``.

    Every revision on the page is fetched concurrently. The lookup is an exact,
    case-sensitive match on the file mapping's keys. If any fetch fails the
    error propagates and no partial list is produced; the remaining fetches are
    left to finish and their results are discarded.
    """
    commits = await github_client.get_commits(gist_id, page=page, per_page=per_page)

    async def has_file(commit: dict[str, Any]) -> bool:
        revision = await github_client.get_revision(gist_id, commit["version"])
        return filename in (revision.get("files") or {})

    matches = await asyncio.gather(*(has_file(commit) for commit in commits))

    logger.debug(
        f"{sum(matches)} of {len(commits)} revisions of {gist_id} contain {filename!r}"
    )

    return [
        sanitize_commit_entry(commit)
        for commit, matched in zip(commits, matches)
        if matched
    ]
