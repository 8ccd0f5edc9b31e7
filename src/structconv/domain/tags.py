"""Tag domain logic — parsing field directives.

A tag lives in a dataclass field's metadata under a namespace key::

    port: int = field(default=80, metadata={"env": "APP_PORT,required"})

The first comma-separated segment is the source key override (empty means
use the default key, ``-`` omits the field); the rest are options.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from structconv.domain.errors import TagError

OMIT_MARKER = "-"
REQUIRED_OPTION = "required"
CONVERT_OPTION = "conv"


class FieldDirective(BaseModel):
    """Parsed tag for one field under one namespace."""

    model_config = {"frozen": True}

    present: bool = False
    key: str = ""
    omitted: bool = False
    required: bool = False
    convert: bool = False


def parse_tag(
    metadata: Mapping[str, Any],
    tag_name: str,
    *,
    allow_convert: bool = False,
) -> FieldDirective:
    """Parse the *tag_name* entry of a field's metadata.

    Unknown options are ignored. ``conv`` is only honoured when
    *allow_convert* is set (generic-map mode).

    Raises:
        TagError: The metadata entry is not a string.

    Examples:
        >>> parse_tag({"env": "PORT,required"}, "env").required
        True
        >>> parse_tag({}, "env").present
        False
    """
    if tag_name not in metadata:
        return FieldDirective()
    raw = metadata[tag_name]
    if not isinstance(raw, str):
        raise TagError(tag_name, raw)

    first, *options = raw.split(",")
    omitted = first == OMIT_MARKER
    return FieldDirective(
        present=True,
        key="" if omitted else first,
        omitted=omitted,
        required=REQUIRED_OPTION in options,
        convert=allow_convert and CONVERT_OPTION in options,
    )
