"""Key converters — map a declared field name to a default source key."""

from __future__ import annotations

import re
from collections.abc import Callable

KeyConverter = Callable[[str], str]

# "DBHost" -> "DB_Host", then "appName" -> "app_Name"
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")
_SEPARATORS = re.compile(r"[-\s]+")


def identity(name: str) -> str:
    return name


def _snake(name: str) -> str:
    text = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    text = _WORD_BOUNDARY.sub(r"\1_\2", text)
    return _SEPARATORS.sub("_", text)


def to_upper_snake(name: str) -> str:
    """Upper snake case, the environment variable convention.

    Examples:
        >>> to_upper_snake("app_name")
        'APP_NAME'
        >>> to_upper_snake("DBHost")
        'DB_HOST'
        >>> to_upper_snake("Float64")
        'FLOAT64'
    """
    return _snake(name).upper()


def to_lower_snake(name: str) -> str:
    """Lower snake case.

    Examples:
        >>> to_lower_snake("AppName")
        'app_name'
    """
    return _snake(name).lower()


KEY_CONVERTERS: dict[str, KeyConverter] = {
    "identity": identity,
    "upper-snake": to_upper_snake,
    "lower-snake": to_lower_snake,
}
