"""Tests for tag parsing."""

from __future__ import annotations

import pytest

from structconv.domain.errors import TagError
from structconv.domain.tags import FieldDirective, parse_tag


class TestParseTag:
    def test_absent_namespace(self) -> None:
        directive = parse_tag({"env": "PORT"}, "map")
        assert directive == FieldDirective()
        assert directive.present is False
        assert directive.omitted is False
        assert directive.required is False
        assert directive.key == ""

    def test_key_override(self) -> None:
        directive = parse_tag({"map": "alt_name"}, "map")
        assert directive.present is True
        assert directive.key == "alt_name"

    def test_empty_key_with_required(self) -> None:
        directive = parse_tag({"map": ",required"}, "map")
        assert directive.present is True
        assert directive.key == ""
        assert directive.required is True

    def test_omit_marker(self) -> None:
        directive = parse_tag({"map": "-"}, "map")
        assert directive.omitted is True
        assert directive.key == ""

    def test_empty_tag_is_present(self) -> None:
        directive = parse_tag({"map": ""}, "map")
        assert directive.present is True
        assert directive.key == ""

    def test_unknown_options_ignored(self) -> None:
        directive = parse_tag({"map": "k,bogus,required,"}, "map")
        assert directive.key == "k"
        assert directive.required is True

    def test_required_only_after_key(self) -> None:
        """The first segment is always the key, even if it spells an option."""
        directive = parse_tag({"map": "required"}, "map")
        assert directive.key == "required"
        assert directive.required is False

    def test_convert_needs_permission(self) -> None:
        assert parse_tag({"strmap": "k,conv"}, "strmap").convert is False
        assert parse_tag({"map": "k,conv"}, "map", allow_convert=True).convert is True

    def test_non_string_tag_raises(self) -> None:
        with pytest.raises(TagError, match="invalid map tag"):
            parse_tag({"map": 42}, "map")

    def test_frozen(self) -> None:
        directive = parse_tag({"map": "k"}, "map")
        with pytest.raises(Exception):
            directive.key = "other"  # type: ignore[misc]
