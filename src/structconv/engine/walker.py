"""Record walker — depth-first traversal of a record's settable fields.

The base :class:`RecordWalker` resolves each field's directive and key;
the mode-specific subclasses bind the field:

- :class:`MapWalker`: generic nested maps. Nested records recurse into the
  matching sub-map, sequences go to the collection builder, everything
  else is assigned when type-compatible.
- :class:`StringMapWalker`: flat string maps. Nested records recurse with
  the same flat source; scalars are parsed from text.

Field failures are collected, never raised, until the entry point asks
the :class:`ErrorCollector` to raise them together.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from structconv.domain.errors import MSG_INVALID_VALUE, MSG_REQUIRED, TagError
from structconv.domain.options import DecodeOptions
from structconv.domain.shapes import FieldShape, ensure_record, record_shape
from structconv.domain.tags import FieldDirective, parse_tag
from structconv.domain.types import scalar_width, strip_optional, type_name
from structconv.engine.aggregate import ErrorCollector
from structconv.engine.scalars import UNSET, assign_value, parse_scalar
from structconv.engine.sequences import CollectionBuilder, is_sequence

logger = logging.getLogger(__name__)


class RecordWalker:
    """Shared field enumeration and directive handling."""

    allow_convert = False

    def __init__(self, options: DecodeOptions, errors: ErrorCollector | None = None) -> None:
        self.options = options
        self.errors = errors if errors is not None else ErrorCollector()

    def walk(self, record: Any, source: Mapping[str, Any], path: str) -> None:
        """Bind every settable field of *record* from *source*."""
        shape = record_shape(type(record))
        for field in shape.fields:
            try:
                directive = parse_tag(
                    field.metadata,
                    self.options.tag_name,
                    allow_convert=self.allow_convert,
                )
            except TagError as exc:
                self.errors.add(self.tag_error_name(field, path), str(exc))
                continue
            if directive.omitted:
                continue
            if self.options.tag_only and not directive.present and not field.is_record:
                continue
            key = directive.key or self.options.key_for(field.name)
            self.bind_field(record, field, directive, key, source, path)

    def tag_error_name(self, field: FieldShape, path: str) -> str:
        return field.name

    def bind_field(
        self,
        record: Any,
        field: FieldShape,
        directive: FieldDirective,
        key: str,
        source: Mapping[str, Any],
        path: str,
    ) -> None:
        raise NotImplementedError


class MapWalker(RecordWalker):
    """Bind from a generic (possibly nested) key/value map."""

    allow_convert = True

    def __init__(self, options: DecodeOptions, errors: ErrorCollector | None = None) -> None:
        super().__init__(options, errors)
        self.sequences = CollectionBuilder(self)

    def tag_error_name(self, field: FieldShape, path: str) -> str:
        return f"{path}[{field.name}]"

    def bind_field(
        self,
        record: Any,
        field: FieldShape,
        directive: FieldDirective,
        key: str,
        source: Mapping[str, Any],
        path: str,
    ) -> None:
        field_path = f"{path}[{key}]"
        if key not in source:
            if directive.required:
                self.errors.add(field_path, MSG_REQUIRED.format(key=key))
            return

        value = source[key]
        if value is None:
            return
        if field.is_record and isinstance(value, Mapping):
            self.walk(ensure_record(record, field), value, field_path)
            return
        if field.collection and is_sequence(value):
            self.sequences.decode(record, field, value, field_path, convert=directive.convert)
            return

        resolved = assign_value(value, field.annotation, convert=directive.convert)
        if resolved is UNSET:
            # leaf mismatches are not errors
            logger.debug("Ignoring incompatible value for %s", field_path)
            return
        setattr(record, field.name, resolved)


class StringMapWalker(RecordWalker):
    """Bind from a flat string map."""

    def __init__(self, options: DecodeOptions, errors: ErrorCollector | None = None) -> None:
        super().__init__(options, errors)
        self._active: list[type] = []

    def walk(self, record: Any, source: Mapping[str, Any], path: str) -> None:
        self._active.append(type(record))
        try:
            super().walk(record, source, path)
        finally:
            self._active.pop()

    def bind_field(
        self,
        record: Any,
        field: FieldShape,
        directive: FieldDirective,
        key: str,
        source: Mapping[str, Any],
        path: str,
    ) -> None:
        if field.collection:
            return
        if field.is_record:
            # a record type already on the stack would recurse forever
            if field.record_type in self._active:
                return
            self.walk(ensure_record(record, field), source, path)
            return

        if key not in source:
            if directive.required:
                self.errors.add(key, MSG_REQUIRED.format(key=key))
            return

        text = source[key]
        inner, _ = strip_optional(field.annotation)
        width = scalar_width(inner)
        if width is None:
            logger.debug("Skipping %s: %s is not a scalar kind", key, type_name(inner))
            return
        try:
            if not isinstance(text, str):
                raise ValueError(f"expected str, got {type(text).__name__}")
            value = parse_scalar(text, width)
        except ValueError:
            msg = MSG_INVALID_VALUE.format(value=text, type=type_name(inner))
            self.errors.add(key, msg, value=str(text))
            return
        setattr(record, field.name, value)
