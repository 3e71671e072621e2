"""Request and response bodies exchanged with the feed editor service."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from gyokaclient.models.base import GyokaModel
from gyokaclient.models.post import Post


def _null_as_empty(value: Any) -> Any:
    return [] if value is None else value


# The server encodes empty post lists as null.
PostList = Annotated[list[Post], BeforeValidator(_null_as_empty)]


class PostsRequest(GyokaModel):
    """Body of ``POST /feed/add`` and ``POST /feed/delete``."""

    posts: list[Post]


class AddPostsResponse(GyokaModel):
    inserted_posts: PostList = Field(default_factory=list)
    failed_posts: PostList = Field(default_factory=list)
    message: str = ""


class DeletePostsResponse(GyokaModel):
    deleted_posts: PostList = Field(default_factory=list)
    failed_posts: PostList = Field(default_factory=list)
    message: str = ""


class ListPostsResponse(GyokaModel):
    feed: str = ""
    count: int = 0
    posts: PostList = Field(default_factory=list)


class TrimResponse(GyokaModel):
    message: str = ""
    deleted_count: int = 0


class ErrorResponse(GyokaModel):
    """Error payload returned with non-200 statuses. Both fields are optional."""

    message: str | None = None
    error: str | None = None


__all__ = [
    "AddPostsResponse",
    "DeletePostsResponse",
    "ErrorResponse",
    "ListPostsResponse",
    "PostList",
    "PostsRequest",
    "TrimResponse",
]
