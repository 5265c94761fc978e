"""Gist-related endpoints."""

import re
from typing import Annotated

from fastapi import APIRouter, Body, Depends, Query

from app.models.schemas import (
    CreatedGist,
    DataResponse,
    ErrorResponse,
    GistCreateRequest,
    GistUpdateRequest,
    MessageResponse,
)
from app.services.github_client import GitHubClient
from app.services.sanitizer import sanitize_commit_entry, sanitize_gist

router = APIRouter(tags=["Gists"])

ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "Gist not found"},
    500: {"model": ErrorResponse, "description": "Something went wrong"},
}

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


async def get_github_client() -> GitHubClient:
    """Placeholder - overridden in main.py."""
    raise NotImplementedError


def parse_page_param(value: str | None) -> int | float | None:
    """
    Parse a pagination query value the lenient way.

    Leading digits win (``"12abc"`` is 12), a missing value stays ``None``
    and anything non-numeric becomes NaN, which is forwarded to GitHub as-is.
    """
    if value is None or value == "":
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return float("nan")
    return int(match.group(1))


async def pagination_params(
    page: Annotated[str | None, Query(description="Page number")] = None,
    per_page: Annotated[str | None, Query(description="Items per page")] = None,
) -> tuple[int | float | None, int | float | None]:
    return parse_page_param(page), parse_page_param(per_page)


@router.post(
    "/",
    response_model=DataResponse,
    summary="Create a gist",
    responses={500: ERROR_RESPONSES[500]},
)
async def create_gist(
    body: Annotated[GistCreateRequest, Body()],
    github_client: GitHubClient = Depends(get_github_client),
) -> DataResponse:
    """Create a gist with a single file and return its id and files."""
    data = await github_client.create_gist(
        filename=body.filename,
        content=body.content,
        description=body.description,
        public=body.public,
    )
    created = CreatedGist(id=data.get("id"), files=data.get("files"))
    return DataResponse(data=created.model_dump())


@router.get(
    "/{gist_id}",
    response_model=DataResponse,
    summary="Get a gist",
    responses=ERROR_RESPONSES,
)
async def get_gist(
    gist_id: str,
    github_client: GitHubClient = Depends(get_github_client),
) -> DataResponse:
    """Fetch a gist with GitHub's bookkeeping fields removed."""
    data = await github_client.get_gist(gist_id)
    return DataResponse(data=sanitize_gist(data))


@router.delete(
    "/{gist_id}",
    response_model=MessageResponse,
    summary="Delete a gist",
    responses=ERROR_RESPONSES,
)
async def delete_gist(
    gist_id: str,
    github_client: GitHubClient = Depends(get_github_client),
) -> MessageResponse:
    await github_client.delete_gist(gist_id)
    return MessageResponse(message="Gist deleted")


@router.patch(
    "/{gist_id}",
    response_model=MessageResponse,
    summary="Create or overwrite a file in a gist",
    responses=ERROR_RESPONSES,
)
async def update_gist(
    gist_id: str,
    body: Annotated[GistUpdateRequest, Body()],
    github_client: GitHubClient = Depends(get_github_client),
) -> MessageResponse:
    await github_client.update_gist(gist_id, body.filename, body.content)
    return MessageResponse(message="Gist updated")


@router.get(
    "/{gist_id}/commits",
    response_model=DataResponse,
    summary="List a gist's commit history",
    responses=ERROR_RESPONSES,
)
async def get_gist_commits(
    gist_id: str,
    pagination: tuple[int | float | None, int | float | None] = Depends(
        pagination_params
    ),
    github_client: GitHubClient = Depends(get_github_client),
) -> DataResponse:
    """
    List one page of commit history in GitHub's order.

    - **page**: Page number, passed through to GitHub
    - **per_page**: Items per page, passed through to GitHub
    """
    page, per_page = pagination
    commits = await github_client.get_commits(gist_id, page=page, per_page=per_page)
    return DataResponse(data=[sanitize_commit_entry(commit) for commit in commits])
