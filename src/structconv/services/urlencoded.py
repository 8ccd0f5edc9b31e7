"""Decode URL query parameters and form bodies into a record.

Both accept either the raw encoded text or an already split
``Mapping[str, Sequence[str]]`` (as produced by ``urllib.parse.parse_qs``
or web frameworks). The first value of a repeated key wins.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from structconv.domain.options import DecodeOptions
from structconv.infrastructure.sources import urlencoded_source
from structconv.services.decode import decode_string_map

FORM_TAG_NAME = "form"
QUERY_PARAM_TAG_NAME = "queryparam"

UrlValues = str | bytes | Mapping[str, Sequence[str] | str]


def decode_query_params(
    query: UrlValues,
    target: Any,
    options: DecodeOptions | None = None,
) -> None:
    """Decode a query string (a leading ``?`` is allowed) into *target*."""
    if isinstance(query, str):
        query = query.removeprefix("?")
    opts = (options or DecodeOptions()).resolve(tag_name=QUERY_PARAM_TAG_NAME)
    decode_string_map(urlencoded_source(query), target, opts)


def decode_form(
    data: UrlValues,
    target: Any,
    options: DecodeOptions | None = None,
) -> None:
    """Decode a URL-encoded form body into *target*."""
    opts = (options or DecodeOptions()).resolve(tag_name=FORM_TAG_NAME)
    decode_string_map(urlencoded_source(data), target, opts)
