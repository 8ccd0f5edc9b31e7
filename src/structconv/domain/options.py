"""Decode options shared by every entry point."""

from __future__ import annotations

from pydantic import BaseModel

from structconv.domain.casing import KeyConverter, identity


class DecodeOptions(BaseModel):
    """Caller-facing configuration for one decode call.

    Attributes:
        tag_name: Tag namespace to read. Empty selects the entry point default.
        tag_only: Skip fields that carry no tag and are not nested records.
        key_converter: Maps a declared field name to the default source key.
            None selects the entry point default.
    """

    model_config = {"frozen": True}

    tag_name: str = ""
    tag_only: bool = False
    key_converter: KeyConverter | None = None

    def resolve(self, *, tag_name: str, key_converter: KeyConverter = identity) -> DecodeOptions:
        """Fill unset fields with entry point defaults."""
        return self.model_copy(
            update={
                "tag_name": self.tag_name or tag_name,
                "key_converter": self.key_converter or key_converter,
            }
        )

    def key_for(self, field_name: str) -> str:
        converter = self.key_converter or identity
        return converter(field_name)
