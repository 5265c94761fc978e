"""Strip GitHub-internal bookkeeping from gist payloads before returning them."""

from typing import Any

GIST_INTERNAL_FIELDS = frozenset(
    {
        "owner",
        "history",
        "forks",
        "user",
        "url",
        "forks_url",
        "commits_url",
        "git_pull_url",
        "git_push_url",
        "html_url",
        "comments_url",
    }
)
FILE_INTERNAL_FIELDS = frozenset({"raw_url"})
COMMIT_INTERNAL_FIELDS = frozenset({"user", "url"})


def _without(data: dict[str, Any], fields: frozenset[str]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if key not in fields}


def sanitize_gist(payload: dict[str, Any]) -> dict[str, Any]:
    """
    Remove provider-internal fields from a gist or revision payload.

    Top-level ownership, history, fork and URL metadata is dropped, and every
    file entry loses its raw content URL. Everything else is kept as-is.
    The input is not modified.
    """
    cleaned = _without(payload, GIST_INTERNAL_FIELDS)

    files = cleaned.get("files")
    if isinstance(files, dict):
        cleaned["files"] = {
            filename: _without(file_data, FILE_INTERNAL_FIELDS)
            if isinstance(file_data, dict)
            else file_data
            for filename, file_data in files.items()
        }

    return cleaned


def sanitize_commit_entry(entry: dict[str, Any]) -> dict[str, Any]:
    """Remove committer identity and API URL from a commit history entry."""
    return _without(entry, COMMIT_INTERNAL_FIELDS)
