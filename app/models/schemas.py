"""Pydantic models for request/response validation."""

from typing import Any

from pydantic import BaseModel, Field


class GistCreateRequest(BaseModel):
    """Body of a gist creation request: one file plus gist metadata."""

    description: str | None = None
    filename: str = Field(min_length=1)
    content: str
    public: bool = False


class GistUpdateRequest(BaseModel):
    """Body of a gist update request: the file to create or overwrite."""

    filename: str = Field(min_length=1)
    content: str


class CreatedGist(BaseModel):
    """The narrow view of a freshly created gist."""

    id: str | None = None
    files: dict[str, Any] | None = None


class DataResponse(BaseModel):
    """Successful response carrying a payload."""

    success: bool = True
    data: Any


class MessageResponse(BaseModel):
    """Successful response carrying only a confirmation message."""

    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Standard error response."""

    success: bool = False
    message: str

