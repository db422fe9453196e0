"""Shared base models for request and response schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PayloadModel(BaseModel):
    """Request body: camelCase keys, unknown keys rejected."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    def to_fields(self) -> dict:
        """Only the keys the client actually sent, under their wire names."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class ReadModel(BaseModel):
    """Response body built from a stored entity dict."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: str
