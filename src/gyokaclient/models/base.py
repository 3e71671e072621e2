"""Base model shared by every wire type.

Example:
    >>> from gyokaclient.models.base import GyokaModel
    >>> class Example(GyokaModel):
    ...     indexed_at: str = ""
    >>> Example.model_validate({"indexedAt": "2024-01-01"}).indexed_at
    '2024-01-01'
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class GyokaModel(BaseModel):
    """Base model with standard configuration.

    Python attributes are snake_case; the wire format is camelCase.
    Unknown fields sent by the server are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )
