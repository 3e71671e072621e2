"""Post model.

Example:
    >>> from gyokaclient.models.post import Post
    >>> post = Post(uri="at://did:plc:abc/app.bsky.feed.post/1", cid="bafy", indexed_at="2024-01-15T00:00:00Z")
    >>> post.model_dump(by_alias=True, exclude_none=True)["indexedAt"]
    '2024-01-15T00:00:00Z'
"""

from __future__ import annotations

from pydantic import Field, field_validator

from gyokaclient.models.base import GyokaModel
from gyokaclient.models.uri import FeedUri, PostUri


class Post(GyokaModel):
    """A reference to a piece of content placed in a feed.

    The server is authoritative for uniqueness; the client sends posts as given.
    """

    feed: FeedUri | None = Field(default=None, description="Feed the post belongs to")
    uri: PostUri = Field(..., description="AT URI of the post record")
    cid: str = Field(default="", description="Content identifier (opaque hash)")
    indexed_at: str = Field(default="", description="Timestamp the post was indexed")

    @field_validator("feed", mode="before")
    @classmethod
    def empty_feed_is_unset(cls, value: object) -> object:
        # An empty feed is left off the wire, same as an unset one.
        return None if value == "" else value
