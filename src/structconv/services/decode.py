"""Decode entry points — generic maps and flat string maps.

INVARIANT: Each call either returns None or raises exactly one
DecodeError holding every field failure, in walk order.
Contract violations raise DecodeContractError before any field is touched.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from structconv.domain.errors import DecodeContractError
from structconv.domain.options import DecodeOptions
from structconv.domain.shapes import is_mutable_record
from structconv.engine.walker import MapWalker, StringMapWalker

logger = logging.getLogger(__name__)

MAP_TAG_NAME = "map"
STRING_MAP_TAG_NAME = "strmap"
MAP_ROOT_PATH = "map"


def check_target(target: Any) -> None:
    """Reject anything but a mutable dataclass instance."""
    if not is_mutable_record(target):
        msg = (
            "structconv: target must be an instance of a non-frozen dataclass, "
            f"got {type(target).__name__}"
        )
        raise DecodeContractError(msg)


def _check_source(source: Any) -> None:
    if not isinstance(source, Mapping):
        raise DecodeContractError(
            f"structconv: source must be a mapping, got {type(source).__name__}"
        )


def decode_map(
    source: Mapping[str, Any],
    target: Any,
    options: DecodeOptions | None = None,
) -> None:
    """Decode a generic key/value map into *target* in place.

    Values may be of any type, including nested maps and sequences.
    Scalar leaves whose type does not match the field are left alone
    unless the field's tag carries ``conv``.

    Raises:
        DecodeContractError: *target* is not a mutable record.
        DecodeError: One or more fields failed.
    """
    check_target(target)
    _check_source(source)
    opts = (options or DecodeOptions()).resolve(tag_name=MAP_TAG_NAME)
    logger.debug("Decoding map into %s (tag=%s)", type(target).__name__, opts.tag_name)

    walker = MapWalker(opts)
    walker.walk(target, source, MAP_ROOT_PATH)
    logger.debug("Decoded %s (%d field errors)", type(target).__name__, len(walker.errors))
    walker.errors.raise_if_any()


def decode_string_map(
    source: Mapping[str, str],
    target: Any,
    options: DecodeOptions | None = None,
) -> None:
    """Decode a flat string map into *target* in place.

    Nested records read from the same flat map; sequence fields are skipped.

    Raises:
        DecodeContractError: *target* is not a mutable record.
        DecodeError: One or more fields failed.
    """
    check_target(target)
    _check_source(source)
    opts = (options or DecodeOptions()).resolve(tag_name=STRING_MAP_TAG_NAME)
    logger.debug("Decoding string map into %s (tag=%s)", type(target).__name__, opts.tag_name)

    walker = StringMapWalker(opts)
    walker.walk(target, source, "")
    logger.debug("Decoded %s (%d field errors)", type(target).__name__, len(walker.errors))
    walker.errors.raise_if_any()
