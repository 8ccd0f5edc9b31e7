"""Collection builder — rebuild nested sequences from generic sources.

Two passes per field:
1. Validation: every layer's kind and, for fixed layers, its length must
   match the source. Any mismatch aborts the field before construction.
2. Construction: layers are rebuilt recursively. Leaf records are decoded
   by a fresh sub-walk; leaf scalars go through the scalar converter.
   Element errors are namespaced ``[i]`` and siblings keep going.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from structconv.domain.errors import MSG_INVALID_TYPE
from structconv.domain.shapes import (
    CollectionShape,
    FieldShape,
    LayerKind,
    new_record,
    record_type_of,
    zero_value,
)
from structconv.domain.types import type_name
from structconv.engine.aggregate import ErrorCollector
from structconv.engine.scalars import UNSET, assign_value

if TYPE_CHECKING:
    from structconv.engine.walker import MapWalker

logger = logging.getLogger(__name__)


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def describe_source(value: Any) -> str:
    """Short shape description of a source value, e.g. ``list[3]``."""
    if is_sequence(value):
        return f"{type(value).__name__}[{len(value)}]"
    return type(value).__name__


class CollectionBuilder:
    """Decode sequence-typed fields for a :class:`MapWalker`."""

    def __init__(self, walker: MapWalker) -> None:
        self._walker = walker

    def decode(
        self,
        record: Any,
        shape: FieldShape,
        value: Any,
        path: str,
        *,
        convert: bool = False,
    ) -> None:
        """Validate then build *value* into ``record.<shape.name>``.

        On a shape mismatch the field is left untouched.
        """
        mismatches = ErrorCollector()
        self.check(value, shape.collection, path, mismatches)
        if mismatches:
            logger.debug("Shape mismatch for %s (%d errors)", path, len(mismatches))
            self._walker.errors.extend(mismatches.errors)
            return
        built = self.build(value, shape.collection, path, convert=convert)
        setattr(record, shape.name, built)

    def check(
        self,
        value: Any,
        collection: CollectionShape,
        path: str,
        errors: ErrorCollector,
        depth: int = 0,
    ) -> None:
        """Compare *value* against the layers from *depth* down."""
        if value is None:
            return
        layer = collection.layers[depth]
        if not is_sequence(value) or (
            layer.kind is LayerKind.FIXED and len(value) != layer.length
        ):
            msg = MSG_INVALID_TYPE.format(
                source=describe_source(value),
                target=type_name(layer.annotation),
            )
            errors.add(path, msg)
            return
        if depth + 1 >= len(collection.layers):
            return
        for i, item in enumerate(value):
            self.check(item, collection, f"{path}[{i}]", errors, depth + 1)

    def build(
        self,
        value: Any,
        collection: CollectionShape,
        path: str,
        *,
        convert: bool = False,
        depth: int = 0,
    ) -> Any:
        """Construct the layer at *depth* from a validated source."""
        layer = collection.layers[depth]
        if value is None:
            return None if layer.optional else zero_value(layer.annotation)

        last = depth + 1 >= len(collection.layers)
        items: list[Any] = []
        for i, item in enumerate(value):
            item_path = f"{path}[{i}]"
            if last:
                items.append(self._build_leaf(item, collection.leaf, item_path, convert=convert))
            else:
                items.append(
                    self.build(item, collection, item_path, convert=convert, depth=depth + 1)
                )
        return layer.container(items)

    def _build_leaf(self, item: Any, annotation: Any, path: str, *, convert: bool) -> Any:
        if item is None:
            return zero_value(annotation)

        record_type = record_type_of(annotation)
        if record_type is not None:
            if isinstance(item, Mapping):
                element = new_record(record_type)
                self._walker.walk(element, item, path)
                return element
            if isinstance(item, record_type):
                return item
            msg = MSG_INVALID_TYPE.format(source=describe_source(item), target=type_name(annotation))
            self._walker.errors.add(path, msg)
            return zero_value(annotation)

        resolved = assign_value(item, annotation, convert=convert)
        return zero_value(annotation) if resolved is UNSET else resolved
