"""AT URI identifier types.

Feeds and posts are named by AT URIs of the form
``at://did:plc:<id>/<collection>/<record-key>``. The types here are plain
``str`` subclasses: building one never fails, and ``validate()`` checks the
grammar on demand.

Example:
    >>> from gyokaclient.models.uri import FeedUri
    >>> FeedUri("at://did:plc:abc/app.bsky.feed.generator/news").is_valid()
    True
    >>> FeedUri("at://did:plc:abc/app.bsky.feed.post/news").is_valid()
    False
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from gyokaclient.core.exceptions import InvalidUriError

AT_SCHEME = "at://"
DID_PLC_PREFIX = "did:plc:"
FEED_GENERATOR_COLLECTION = "app.bsky.feed.generator"
FEED_POST_COLLECTION = "app.bsky.feed.post"


class AtUri(str):
    """An unvalidated AT URI.

    A bare ``AtUri`` accepts any collection; subclasses pin one.
    """

    __slots__ = ()

    collection: ClassVar[str | None] = None
    id_name: ClassVar[str] = "record key"

    def validate_collection(self, collection: str | None, id_name: str) -> None:
        """Check this URI against the grammar for ``collection``.

        Args:
            collection: Literal expected as the second path segment, or
                None to accept any collection
            id_name: Name of the record key used in the error message

        Raises:
            InvalidUriError: Naming the first rule that failed
        """
        uri = str(self)
        if not uri:
            raise InvalidUriError(uri, "uri is empty")
        if not uri.startswith(AT_SCHEME):
            raise InvalidUriError(uri, f"uri must start with {AT_SCHEME}")

        parts = uri[len(AT_SCHEME):].split("/")
        if len(parts) != 3:
            raise InvalidUriError(uri, "invalid uri format")

        did, actual_collection, record_key = parts
        if not did.startswith(DID_PLC_PREFIX):
            raise InvalidUriError(uri, "invalid did format")
        expected = collection if collection is not None else actual_collection
        if not actual_collection or actual_collection != expected:
            raise InvalidUriError(uri, "invalid collection")
        if not record_key:
            raise InvalidUriError(uri, f"{id_name} is empty")

    def validate(self) -> None:
        self.validate_collection(self.collection, self.id_name)

    def is_valid(self) -> bool:
        try:
            self.validate()
        except InvalidUriError:
            return False
        return True

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # Parse as a plain string and wrap; grammar checks stay on demand.
        return core_schema.no_info_after_validator_function(cls, core_schema.str_schema())


class FeedUri(AtUri):
    """URI of a feed generator record."""

    __slots__ = ()

    collection = FEED_GENERATOR_COLLECTION
    id_name = "feed name"


class PostUri(AtUri):
    """URI of a post record."""

    __slots__ = ()

    collection = FEED_POST_COLLECTION
    id_name = "post id"


__all__ = [
    "AtUri",
    "FeedUri",
    "PostUri",
    "FEED_GENERATOR_COLLECTION",
    "FEED_POST_COLLECTION",
]
