"""Scalar kinds and annotation helpers.

The closed set of scalar kinds a flat string value can be parsed into.
Python has a single ``int`` and ``float`` type, so sized kinds are
expressed as ``Annotated`` aliases carrying a :class:`Width` marker:

    port: Uint16 = 0
    ratio: Float32 = 0.0

Plain ``int`` is unbounded and plain ``float`` is 64-bit.
"""

from __future__ import annotations

import types
from dataclasses import dataclass
from enum import StrEnum
from typing import Annotated, Any, Union, get_args, get_origin


class ScalarKind(StrEnum):
    """Scalar kinds supported by text conversion."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"
    UINT = "uint"
    FLOAT = "float"


@dataclass(frozen=True)
class Width:
    """Kind and bit width attached to a numeric annotation."""

    kind: ScalarKind
    bits: int | None
    name: str

    def bounds(self) -> tuple[int, int] | None:
        """Inclusive integer bounds, or None when unbounded or not integral."""
        if self.bits is None or self.kind not in (ScalarKind.INT, ScalarKind.UINT):
            return None
        if self.kind is ScalarKind.UINT:
            return 0, (1 << self.bits) - 1
        half = 1 << (self.bits - 1)
        return -half, half - 1


# --- Sized numeric aliases ---

Int8 = Annotated[int, Width(ScalarKind.INT, 8, "int8")]
Int16 = Annotated[int, Width(ScalarKind.INT, 16, "int16")]
Int32 = Annotated[int, Width(ScalarKind.INT, 32, "int32")]
Int64 = Annotated[int, Width(ScalarKind.INT, 64, "int64")]
Uint = Annotated[int, Width(ScalarKind.UINT, 64, "uint")]
Uint8 = Annotated[int, Width(ScalarKind.UINT, 8, "uint8")]
Uint16 = Annotated[int, Width(ScalarKind.UINT, 16, "uint16")]
Uint32 = Annotated[int, Width(ScalarKind.UINT, 32, "uint32")]
Uint64 = Annotated[int, Width(ScalarKind.UINT, 64, "uint64")]
Float32 = Annotated[float, Width(ScalarKind.FLOAT, 32, "float32")]
Float64 = Annotated[float, Width(ScalarKind.FLOAT, 64, "float64")]

_PLAIN_WIDTHS: dict[type, Width] = {
    str: Width(ScalarKind.STRING, None, "str"),
    bool: Width(ScalarKind.BOOL, None, "bool"),
    int: Width(ScalarKind.INT, None, "int"),
    float: Width(ScalarKind.FLOAT, 64, "float"),
}


def unwrap_annotated(annotation: Any) -> tuple[Any, tuple[Any, ...]]:
    """Split ``Annotated[T, *extras]`` into ``(T, extras)``."""
    if get_origin(annotation) is Annotated:
        base, *extras = get_args(annotation)
        return base, tuple(extras)
    return annotation, ()


def is_union(annotation: Any) -> bool:
    return get_origin(annotation) in (Union, types.UnionType)


def strip_optional(annotation: Any) -> tuple[Any, bool]:
    """Return ``(inner, optional)`` for ``T | None``.

    Only a union of exactly one type with ``None`` counts as optional;
    wider unions are returned unchanged.

    Examples:
        >>> strip_optional(int | None)
        (<class 'int'>, True)
        >>> strip_optional(int)
        (<class 'int'>, False)
    """
    if is_union(annotation):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1 and len(get_args(annotation)) == 2:
            return args[0], True
    return annotation, False


def scalar_width(annotation: Any) -> Width | None:
    """Resolve the scalar kind of an annotation, or None if outside the closed set."""
    base, extras = unwrap_annotated(annotation)
    for extra in extras:
        if isinstance(extra, Width):
            return extra
    if isinstance(base, type):
        return _PLAIN_WIDTHS.get(base)
    return None


def type_name(annotation: Any) -> str:
    """Human-readable name of an annotation for error messages."""
    width = scalar_width(annotation)
    if width is not None:
        return width.name
    base, _ = unwrap_annotated(annotation)
    if get_origin(base) is None and isinstance(base, type):
        return base.__name__
    return repr(base).replace("typing.", "")
