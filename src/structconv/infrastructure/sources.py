"""Source adapters — turn native key/value data into flat string maps.

INVARIANT: When a key repeats, the first value wins.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from urllib.parse import parse_qs


def flatten_values(values: Mapping[str, Sequence[str] | str]) -> dict[str, str]:
    """Collapse multi-valued entries to their first value.

    Keys with no values are dropped; plain string values pass through.

    Examples:
        >>> flatten_values({"a": ["1", "2"], "b": [], "c": "x"})
        {'a': '1', 'c': 'x'}
    """
    flat: dict[str, str] = {}
    for key, value in values.items():
        if isinstance(value, str):
            flat[key] = value
        elif value:
            flat[key] = value[0]
    return flat


def parse_urlencoded(data: str | bytes) -> dict[str, list[str]]:
    """Split an ``application/x-www-form-urlencoded`` payload.

    Blank values are kept so ``flag=`` still counts as present. Invalid
    UTF-8 bytes become U+FFFD, as ``parse_qs`` does for percent escapes.
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8", errors="replace")
    return parse_qs(data, keep_blank_values=True)


def urlencoded_source(data: str | bytes | Mapping[str, Sequence[str] | str]) -> dict[str, str]:
    """Flat string map from an encoded payload or an already split mapping."""
    if isinstance(data, (str, bytes)):
        return flatten_values(parse_urlencoded(data))
    return flatten_values(data)
