"""Pydantic models for gyokaclient."""

from gyokaclient.models.base import GyokaModel
from gyokaclient.models.messages import (
    AddPostsResponse,
    DeletePostsResponse,
    ErrorResponse,
    ListPostsResponse,
    PostsRequest,
    TrimResponse,
)
from gyokaclient.models.post import Post
from gyokaclient.models.uri import AtUri, FeedUri, PostUri

__all__ = [
    # Base
    "GyokaModel",
    # Identifiers
    "AtUri",
    "FeedUri",
    "PostUri",
    # Posts
    "Post",
    # Wire bodies
    "PostsRequest",
    "AddPostsResponse",
    "DeletePostsResponse",
    "ListPostsResponse",
    "TrimResponse",
    "ErrorResponse",
]
