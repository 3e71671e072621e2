"""Tests for gyokaclient.models.post and wire bodies."""

from __future__ import annotations

import json

import pytest

from gyokaclient.models import (
    AddPostsResponse,
    ErrorResponse,
    FeedUri,
    ListPostsResponse,
    Post,
    PostsRequest,
    PostUri,
    TrimResponse,
)

FEED = "at://did:plc:test/app.bsky.feed.generator/test"
POST = "at://did:plc:test/app.bsky.feed.post/test"


class TestPost:
    """Tests for Post model."""

    def test_create_minimal(self) -> None:
        """Only the post URI is required."""
        post = Post(uri=POST)
        assert post.uri == POST
        assert post.feed is None
        assert post.cid == ""
        assert post.indexed_at == ""

    def test_uri_required(self) -> None:
        with pytest.raises(ValueError):
            Post()  # type: ignore[call-arg]

    def test_field_types(self) -> None:
        """URIs are parsed into their identifier types."""
        post = Post(feed=FEED, uri=POST)
        assert isinstance(post.feed, FeedUri)
        assert isinstance(post.uri, PostUri)

    def test_invalid_uri_accepted(self) -> None:
        """Parsing does not run URI validation."""
        post = Post(uri="bogus")
        assert not post.uri.is_valid()

    def test_wire_names(self) -> None:
        """Serialized with camelCase names; feed omitted when unset."""
        post = Post(uri=POST, cid="bafy", indexed_at="2024-01-15T00:00:00Z")
        data = json.loads(post.model_dump_json(by_alias=True, exclude_none=True))
        assert data == {"uri": POST, "cid": "bafy", "indexedAt": "2024-01-15T00:00:00Z"}

    def test_empty_feed_omitted(self) -> None:
        post = Post(feed="", uri=POST)
        assert post.feed is None
        data = json.loads(post.model_dump_json(by_alias=True, exclude_none=True))
        assert "feed" not in data

    def test_parse_wire_payload(self) -> None:
        post = Post.model_validate(
            {"feed": FEED, "uri": POST, "cid": "c", "indexedAt": "t", "unknown": 1}
        )
        assert post.feed == FEED
        assert post.indexed_at == "t"


class TestMessages:
    """Tests for request/response bodies."""

    def test_posts_request_shape(self) -> None:
        body = PostsRequest(posts=[Post(feed=FEED, uri=POST)])
        data = json.loads(body.model_dump_json(by_alias=True, exclude_none=True))
        assert data == {"posts": [{"feed": FEED, "uri": POST, "cid": "", "indexedAt": ""}]}

    def test_add_response_defaults(self) -> None:
        resp = AddPostsResponse()
        assert resp.inserted_posts == []
        assert resp.failed_posts == []
        assert resp.message == ""

    def test_null_lists_decode_as_empty(self) -> None:
        resp = AddPostsResponse.model_validate_json(
            '{"insertedPosts": null, "failedPosts": null, "message": "ok"}'
        )
        assert resp.inserted_posts == []
        assert resp.failed_posts == []

    def test_list_response(self) -> None:
        resp = ListPostsResponse.model_validate_json(
            json.dumps({"feed": FEED, "count": 1, "posts": [{"uri": POST}]})
        )
        assert resp.count == 1
        assert resp.posts[0].uri == POST

    def test_trim_response(self) -> None:
        resp = TrimResponse.model_validate_json('{"message": "trimmed", "deletedCount": 7}')
        assert resp.deleted_count == 7

    def test_error_response_fields_optional(self) -> None:
        assert ErrorResponse.model_validate_json("{}").message is None
        err = ErrorResponse.model_validate_json('{"message": "m", "error": "e"}')
        assert (err.message, err.error) == ("m", "e")
