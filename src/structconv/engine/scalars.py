"""Scalar value converter.

Two modes:
- Text parsing (:func:`parse_scalar`): flat string sources. A dispatch
  table keyed by :class:`ScalarKind` parses text sized to the width.
- Value assignment (:func:`assign_value`): generic-map sources. A value
  is accepted when compatible with the declared annotation, optionally
  after best-effort coercion. Incompatible values yield :data:`UNSET`.
"""

from __future__ import annotations

import math
import re
import struct
from collections.abc import Callable
from typing import Any, Literal, get_args, get_origin

from structconv.domain.types import (
    ScalarKind,
    Width,
    is_union,
    scalar_width,
    strip_optional,
    unwrap_annotated,
)


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()

FLOAT32_MAX = 3.4028234663852886e38
# halfway between FLOAT32_MAX and 2**128; anything at or above rounds to inf
_FLOAT32_OVERFLOW = 3.4028235677973366e38

_BOOL_TOKENS: dict[str, bool] = {
    "1": True,
    "t": True,
    "T": True,
    "TRUE": True,
    "true": True,
    "True": True,
    "0": False,
    "f": False,
    "F": False,
    "FALSE": False,
    "false": False,
    "False": False,
}

# "010" is octal 8, as in C-style base-prefix parsing.
_LEGACY_OCTAL = re.compile(r"[+-]?0[0-7_]+")


# ── Text parsers ──────────────────────────────────────────────────────


def _require_clean(text: str) -> None:
    if not text or text != text.strip():
        raise ValueError(f"invalid syntax: {text!r}")


def check_range(value: int, width: Width) -> int:
    bounds = width.bounds()
    if bounds is not None and not bounds[0] <= value <= bounds[1]:
        raise ValueError(f"{value} out of range for {width.name}")
    return value


def round_float(value: float, width: Width) -> float:
    """Round *value* to the precision of *width*, rejecting overflow."""
    if width.bits != 32 or not math.isfinite(value):
        return value
    if abs(value) >= _FLOAT32_OVERFLOW:
        raise ValueError(f"{value} out of range for {width.name}")
    return struct.unpack("f", struct.pack("f", value))[0]


def parse_string(text: str, width: Width) -> str:
    return text


def parse_bool(text: str, width: Width) -> bool:
    try:
        return _BOOL_TOKENS[text]
    except KeyError:
        raise ValueError(f"invalid syntax: {text!r}") from None


def parse_int(text: str, width: Width) -> int:
    _require_clean(text)
    if _LEGACY_OCTAL.fullmatch(text):
        return check_range(int(text, 8), width)
    return check_range(int(text, 0), width)


def parse_uint(text: str, width: Width) -> int:
    if text[:1] in ("+", "-"):
        raise ValueError(f"invalid syntax: {text!r}")
    return parse_int(text, width)


def parse_float(text: str, width: Width) -> float:
    _require_clean(text)
    value = float(text)
    if math.isinf(value) and "inf" not in text.lower():
        raise ValueError(f"{text} out of range for {width.name}")
    return round_float(value, width)


_PARSERS: dict[ScalarKind, Callable[[str, Width], Any]] = {
    ScalarKind.STRING: parse_string,
    ScalarKind.BOOL: parse_bool,
    ScalarKind.INT: parse_int,
    ScalarKind.UINT: parse_uint,
    ScalarKind.FLOAT: parse_float,
}


def parse_scalar(text: str, width: Width) -> Any:
    """Parse *text* into the scalar kind described by *width*.

    Raises:
        ValueError: The text is not a valid value of that kind.
    """
    return _PARSERS[width.kind](text, width)


# ── Generic value assignment ──────────────────────────────────────────


def is_compatible(value: Any, annotation: Any) -> bool:
    """Whether *value* may be assigned to a field declared as *annotation*.

    ``Any``/``object`` accept everything, unions accept any member, classes
    accept instances (a bool is not a number), generics check their origin.
    """
    base, _ = unwrap_annotated(annotation)
    if base is Any or base is object:
        return True
    if is_union(base):
        return any(is_compatible(value, arg) for arg in get_args(base))
    if base is None or base is type(None):
        return value is None
    origin = get_origin(base)
    if origin is Literal:
        return value in get_args(base)
    target = origin or base
    if not isinstance(target, type):
        return False
    if isinstance(value, bool) and target in (int, float):
        return False
    try:
        if not isinstance(value, target):
            return False
    except TypeError:
        # non-runtime protocols
        return False
    width = scalar_width(annotation)
    bounds = width.bounds() if width is not None else None
    if bounds is not None and isinstance(value, int):
        return bounds[0] <= value <= bounds[1]
    return True


def coerce_value(value: Any, annotation: Any) -> Any:
    """Best-effort conversion of *value* to the scalar kind of *annotation*.

    Non-scalar annotations return *value* unchanged.

    Raises:
        ValueError: The value cannot represent the destination kind.
        TypeError: The value's type cannot be converted at all.
    """
    inner, _ = strip_optional(annotation)
    width = scalar_width(inner)
    if width is None:
        return value
    if isinstance(value, str):
        return parse_scalar(value, width)
    if width.kind is ScalarKind.STRING:
        return str(value)
    if isinstance(value, bool) or width.kind is ScalarKind.BOOL:
        if isinstance(value, bool) and width.kind is ScalarKind.BOOL:
            return value
        raise TypeError(f"cannot convert {type(value).__name__} to {width.name}")
    if width.kind in (ScalarKind.INT, ScalarKind.UINT):
        return check_range(int(value), width)
    return round_float(float(value), width)


def assign_value(value: Any, annotation: Any, *, convert: bool = False) -> Any:
    """Resolve the value to store in a field, or :data:`UNSET` to leave it."""
    if convert:
        try:
            value = coerce_value(value, annotation)
        except (TypeError, ValueError, OverflowError):
            return UNSET
    if is_compatible(value, annotation):
        return value
    return UNSET
