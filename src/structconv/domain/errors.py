"""Decode error types — field-level failures and the aggregate report.

Two error classes:
- Contract violation (:class:`DecodeContractError`): the target is not a
  mutable record. Raised immediately, never aggregated.
- Field-level failure (:class:`FieldError`): collected during the walk and
  raised together as one :class:`DecodeError`.

INVARIANT: A DecodeError always carries at least one FieldError.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_MESSAGE = "decoding failed"

MSG_REQUIRED = "{key} is required"
MSG_INVALID_VALUE = "{value} must be {type}"
MSG_INVALID_TYPE = "invalid type: in={source}, out={target}"
MSG_INVALID_TAG = "invalid {tag_name} tag: expected str, got {type}"


class FieldError(BaseModel):
    """A single field's failures.

    Attributes:
        name: Field path, e.g. ``map[DB][Port]`` or a flat source key.
        value: Raw offending text (string-map mode), empty otherwise.
        messages: Human-readable failure messages.
    """

    model_config = {"frozen": True}

    name: str
    value: str = ""
    messages: list[str] = Field(default_factory=list)


class DecodeReport(BaseModel):
    """Serializable form of a :class:`DecodeError`."""

    model_config = {"frozen": True}

    message: str = DEFAULT_MESSAGE
    errors: list[FieldError] = Field(default_factory=list)


class DecodeError(Exception):
    """One or more fields failed to decode."""

    def __init__(self, errors: Sequence[FieldError], message: str = DEFAULT_MESSAGE) -> None:
        if not errors:
            raise ValueError("DecodeError requires at least one field error")
        super().__init__(message)
        self.message = message or DEFAULT_MESSAGE
        self.errors: list[FieldError] = list(errors)

    def report(self) -> DecodeReport:
        return DecodeReport(message=self.message, errors=self.errors)

    def __str__(self) -> str:
        return "structconv:\n" + self.report().model_dump_json(indent=2)


class DecodeContractError(TypeError):
    """The decode target or source violates the entry point contract."""


class TagError(ValueError):
    """A field's tag metadata could not be parsed."""

    def __init__(self, tag_name: str, value: Any) -> None:
        self.tag_name = tag_name
        self.value = value
        super().__init__(MSG_INVALID_TAG.format(tag_name=tag_name, type=type(value).__name__))
