"""Record and collection shapes — reflective field descriptors.

A record is a dataclass instance. Its shape lists the settable fields
with their resolved annotations, the nested record type (following
``Optional``), and the sequence layers wrapping the leaf element type.

Shapes are derived on every call; nothing is cached between decodes.
"""

from __future__ import annotations

import dataclasses
import typing
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, get_args, get_origin

from structconv.domain.errors import DecodeContractError
from structconv.domain.types import strip_optional, unwrap_annotated


class LayerKind(StrEnum):
    """Sequence layer kinds."""

    FIXED = "fixed"
    VARIABLE = "variable"


@dataclass(frozen=True)
class ContainerLayer:
    """One nesting level of a collection annotation."""

    kind: LayerKind
    container: type  # list or tuple
    annotation: Any  # declared type of this level, Optional stripped
    element: Any
    length: int | None = None
    optional: bool = False


@dataclass(frozen=True)
class CollectionShape:
    """Sequence layers from the outermost container down to the leaf."""

    layers: tuple[ContainerLayer, ...] = ()
    leaf: Any = None

    def __bool__(self) -> bool:
        return bool(self.layers)


@dataclass(frozen=True)
class FieldShape:
    """A settable field of a record."""

    name: str
    annotation: Any
    metadata: Mapping[str, Any] = field(default_factory=dict)
    record_type: type | None = None
    optional: bool = False
    collection: CollectionShape = field(default_factory=CollectionShape)

    @property
    def is_record(self) -> bool:
        return self.record_type is not None


@dataclass(frozen=True)
class RecordShape:
    """Ordered settable fields of a record type."""

    record_type: type
    fields: tuple[FieldShape, ...]


# --- Record predicates ---


def is_record_type(annotation: Any) -> bool:
    return isinstance(annotation, type) and dataclasses.is_dataclass(annotation)


def is_frozen(record_type: type) -> bool:
    params = getattr(record_type, "__dataclass_params__", None)
    return bool(params and params.frozen)


def is_mutable_record(obj: Any) -> bool:
    """True for an instance of a non-frozen dataclass."""
    return is_record_type(type(obj)) and not is_frozen(type(obj))


def record_type_of(annotation: Any) -> type | None:
    """Dereference ``Optional`` and ``Annotated`` down to a dataclass type."""
    inner, _ = strip_optional(annotation)
    base, _ = unwrap_annotated(inner)
    return base if is_record_type(base) else None


# --- Shape derivation ---


def _type_hints(record_type: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(record_type, include_extras=True)
    except (NameError, TypeError) as exc:
        msg = f"structconv: cannot resolve annotations of {record_type.__qualname__}: {exc}"
        raise DecodeContractError(msg) from exc


def _container_layer(annotation: Any, optional: bool) -> ContainerLayer | None:
    origin = get_origin(annotation)
    args = get_args(annotation)
    if origin is list and len(args) == 1:
        return ContainerLayer(LayerKind.VARIABLE, list, annotation, args[0], optional=optional)
    if origin is not tuple or not args:
        return None
    if len(args) == 2 and args[1] is Ellipsis:
        return ContainerLayer(LayerKind.VARIABLE, tuple, annotation, args[0], optional=optional)
    if args == (args[0],) * len(args):
        return ContainerLayer(
            LayerKind.FIXED,
            tuple,
            annotation,
            args[0],
            length=len(args),
            optional=optional,
        )
    # heterogeneous tuples are leaf values
    return None


def collection_shape(annotation: Any) -> CollectionShape:
    """Peel ``list``/``tuple`` layers off *annotation*.

    Examples:
        >>> len(collection_shape(list[tuple[int, int]]).layers)
        2
        >>> bool(collection_shape(int))
        False
    """
    layers: list[ContainerLayer] = []
    current = annotation
    while True:
        inner, optional = strip_optional(current)
        base, _ = unwrap_annotated(inner)
        layer = _container_layer(base, optional)
        if layer is None:
            break
        layers.append(layer)
        current = layer.element
    if not layers:
        return CollectionShape()
    return CollectionShape(layers=tuple(layers), leaf=current)


def record_shape(record_type: type) -> RecordShape:
    """Describe the settable fields of *record_type*.

    Private (``_``-prefixed) fields and every field of a frozen dataclass
    are not settable and are left out.
    """
    if not is_record_type(record_type):
        raise DecodeContractError(f"structconv: {record_type!r} is not a dataclass")
    if is_frozen(record_type):
        return RecordShape(record_type=record_type, fields=())

    hints = _type_hints(record_type)
    shapes: list[FieldShape] = []
    for f in dataclasses.fields(record_type):
        if f.name.startswith("_"):
            continue
        annotation = hints.get(f.name, f.type)
        _, optional = strip_optional(annotation)
        shapes.append(
            FieldShape(
                name=f.name,
                annotation=annotation,
                metadata=f.metadata,
                record_type=record_type_of(annotation),
                optional=optional,
                collection=collection_shape(annotation),
            )
        )
    return RecordShape(record_type=record_type, fields=tuple(shapes))


# --- Zero values and allocation ---


def zero_value(annotation: Any, *, _building: frozenset[type] = frozenset()) -> Any:
    """Zero value of a declared type.

    ``Optional`` is None, records are built from their defaults, fixed
    tuples hold element zero values, and unknown types are None.
    """
    inner, optional = strip_optional(annotation)
    if optional:
        return None
    base, _ = unwrap_annotated(inner)
    if is_record_type(base):
        return new_record(base, _building=_building)
    if base is str:
        return ""
    if base is bool:
        return False
    if base is int:
        return 0
    if base is float:
        return 0.0
    layer = _container_layer(base, optional=False)
    if layer is not None and layer.kind is LayerKind.FIXED:
        return tuple(
            zero_value(layer.element, _building=_building) for _ in range(layer.length or 0)
        )
    origin = get_origin(base) or base
    if origin in (list, tuple, dict, set, frozenset):
        return origin()
    return None


def new_record(record_type: type, *, _building: frozenset[type] = frozenset()) -> Any:
    """Allocate a zero-valued instance of *record_type*.

    Fields with a default or default factory keep it; the remaining
    init fields receive the zero value of their annotation.

    Raises:
        DecodeContractError: A required field leads back to a record type
            still being allocated, so no finite zero value exists.
    """
    if record_type in _building:
        raise DecodeContractError(
            f"structconv: cannot allocate {record_type.__qualname__}: "
            "required fields form a cycle (make one Optional or give it a default)"
        )
    building = _building | {record_type}
    hints = _type_hints(record_type)
    kwargs: dict[str, Any] = {}
    for f in dataclasses.fields(record_type):
        if not f.init:
            continue
        if f.default is not dataclasses.MISSING or f.default_factory is not dataclasses.MISSING:
            continue
        kwargs[f.name] = zero_value(hints.get(f.name, f.type), _building=building)
    return record_type(**kwargs)


def ensure_record(record: Any, shape: FieldShape) -> Any:
    """Return the nested record held by *shape*'s field, allocating it if unset."""
    assert shape.record_type is not None
    current = getattr(record, shape.name, None)
    if not isinstance(current, shape.record_type):
        current = new_record(shape.record_type)
        setattr(record, shape.name, current)
    return current
