"""Revision endpoints, mounted only when ``expose_revision_routes`` is enabled."""

from fastapi import APIRouter, Depends

from app.models.schemas import DataResponse
from app.routers.gists import ERROR_RESPONSES, pagination_params
from app.services.github_client import GitHubClient
from app.services.revisions import get_revisions_for_file
from app.services.sanitizer import sanitize_gist

router = APIRouter(tags=["Revisions"])


async def get_github_client() -> GitHubClient:
    """Placeholder - overridden in main.py."""
    raise NotImplementedError


@router.get(
    "/{gist_id}/files/{filename}/commits",
    response_model=DataResponse,
    summary="List the commits whose snapshot contains a file",
    responses=ERROR_RESPONSES,
)
async def get_file_commits(
    gist_id: str,
    filename: str,
    pagination: tuple[int | float | None, int | float | None] = Depends(
        pagination_params
    ),
    github_client: GitHubClient = Depends(get_github_client),
) -> DataResponse:
    """
    List the entries of one commit history page that include ``filename``.

    Each revision on the page is fetched to check for the file, so a page of
    N commits costs N + 1 GitHub requests. One failed fetch fails the request.
    """
    page, per_page = pagination
    commits = await get_revisions_for_file(
        github_client,
        gist_id,
        filename,
        page=page,
        per_page=per_page,
    )
    return DataResponse(data=commits)


@router.get(
    "/{gist_id}/revisions/{sha}",
    response_model=DataResponse,
    summary="Get a gist as it was at a revision",
    responses=ERROR_RESPONSES,
)
async def get_revision(
    gist_id: str,
    sha: str,
    github_client: GitHubClient = Depends(get_github_client),
) -> DataResponse:
    data = await github_client.get_revision(gist_id, sha)
    return DataResponse(data=sanitize_gist(data))
