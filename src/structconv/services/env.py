"""Decode environment variables into a record."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from structconv.domain.casing import to_upper_snake
from structconv.domain.options import DecodeOptions
from structconv.services.decode import decode_string_map

ENV_TAG_NAME = "env"


def decode_env(
    target: Any,
    options: DecodeOptions | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> None:
    """Decode the process environment (or *environ*) into *target*.

    Reads the ``env`` tag namespace; untagged fields default to their
    upper snake case name (``db_host`` -> ``DB_HOST``).
    """
    opts = (options or DecodeOptions()).resolve(
        tag_name=ENV_TAG_NAME,
        key_converter=to_upper_snake,
    )
    decode_string_map(os.environ if environ is None else environ, target, opts)
