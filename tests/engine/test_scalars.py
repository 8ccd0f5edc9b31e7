"""Tests for the scalar value converter."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any, Literal

import pytest

from structconv.domain.types import (
    Float32,
    Int8,
    Int16,
    Int32,
    Int64,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
    scalar_width,
)
from structconv.engine.scalars import (
    UNSET,
    assign_value,
    coerce_value,
    is_compatible,
    parse_scalar,
)


def parse(text: str, annotation: Any) -> Any:
    width = scalar_width(annotation)
    assert width is not None
    return parse_scalar(text, width)


class TestParseBool:
    @pytest.mark.parametrize("text", ["1", "t", "T", "TRUE", "true", "True"])
    def test_truthy(self, text: str) -> None:
        assert parse(text, bool) is True

    @pytest.mark.parametrize("text", ["0", "f", "F", "FALSE", "false", "False"])
    def test_falsy(self, text: str) -> None:
        assert parse(text, bool) is False

    @pytest.mark.parametrize("text", ["yes", "notabool", "", "tRuE"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse(text, bool)


class TestParseInt:
    def test_decimal(self) -> None:
        assert parse("42", int) == 42
        assert parse("-7", int) == -7

    def test_base_prefixes(self) -> None:
        assert parse("0x1F", int) == 31
        assert parse("0o17", int) == 15
        assert parse("0b101", int) == 5

    def test_leading_zero_is_octal(self) -> None:
        assert parse("010", int) == 8

    def test_plain_int_unbounded(self) -> None:
        assert parse(str(2**80), int) == 2**80

    @pytest.mark.parametrize(
        ("annotation", "low", "high"),
        [
            (Int8, -128, 127),
            (Int16, -32768, 32767),
            (Int32, -(2**31), 2**31 - 1),
            (Int64, -(2**63), 2**63 - 1),
        ],
    )
    def test_signed_widths(self, annotation: Any, low: int, high: int) -> None:
        assert parse(str(low), annotation) == low
        assert parse(str(high), annotation) == high
        with pytest.raises(ValueError):
            parse(str(high + 1), annotation)
        with pytest.raises(ValueError):
            parse(str(low - 1), annotation)

    @pytest.mark.parametrize(
        ("annotation", "high"),
        [(Uint8, 255), (Uint16, 65535), (Uint32, 2**32 - 1), (Uint64, 2**64 - 1)],
    )
    def test_unsigned_widths(self, annotation: Any, high: int) -> None:
        assert parse(str(high), annotation) == high
        with pytest.raises(ValueError):
            parse(str(high + 1), annotation)

    def test_unsigned_rejects_sign(self) -> None:
        with pytest.raises(ValueError):
            parse("-1", Uint8)
        with pytest.raises(ValueError):
            parse("+1", Uint8)

    @pytest.mark.parametrize("text", ["", " 1", "1 ", "1.5", "abc", "08"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse(text, int)


class TestParseFloat:
    def test_decimal_and_exponent(self) -> None:
        assert parse("0.3", float) == 0.3
        assert parse("1e3", float) == 1000.0

    def test_special_values(self) -> None:
        assert math.isinf(parse("inf", float))
        assert math.isnan(parse("NaN", float))

    def test_overflow(self) -> None:
        with pytest.raises(ValueError):
            parse("1e400", float)

    def test_float32_rounding(self) -> None:
        value = parse("0.1", Float32)
        assert value != 0.1
        assert math.isclose(value, 0.1, rel_tol=1e-7)

    def test_float32_overflow(self) -> None:
        with pytest.raises(ValueError):
            parse("1e39", Float32)

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("3.4028235e38", 3.4028234663852886e38),
            ("-3.4028235e38", -3.4028234663852886e38),
            ("3.40282356e38", 3.4028234663852886e38),
        ],
    )
    def test_float32_rounds_down_to_max(self, text: str, expected: float) -> None:
        assert parse(text, Float32) == expected

    def test_float32_just_past_max_overflows(self) -> None:
        with pytest.raises(ValueError):
            parse("3.4028236e38", Float32)

    def test_invalid(self) -> None:
        with pytest.raises(ValueError):
            parse("one", float)


class TestParseString:
    def test_verbatim(self) -> None:
        assert parse("  spaced  ", str) == "  spaced  "
        assert parse("", str) == ""


class TestIsCompatible:
    def test_exact_types(self) -> None:
        assert is_compatible(1, int)
        assert is_compatible("s", str)
        assert is_compatible(0.5, float)

    def test_bool_is_not_a_number(self) -> None:
        assert not is_compatible(True, int)
        assert not is_compatible(False, float)
        assert is_compatible(True, bool)

    def test_int_is_not_float(self) -> None:
        assert not is_compatible(1, float)

    def test_any_and_object(self) -> None:
        assert is_compatible(object(), Any)
        assert is_compatible([1], object)

    def test_optional_and_union(self) -> None:
        assert is_compatible(3, int | None)
        assert is_compatible("x", int | str)
        assert not is_compatible(1.5, int | str)

    def test_generic_origin(self) -> None:
        assert is_compatible({"a": 1}, dict[str, int])
        assert not is_compatible([1], dict[str, int])

    def test_abstract_interface(self) -> None:
        assert is_compatible([1, 2], Sequence[int])
        assert not is_compatible({1, 2}, Sequence[int])

    def test_literal(self) -> None:
        assert is_compatible("a", Literal["a", "b"])
        assert not is_compatible("c", Literal["a", "b"])

    def test_sized_range(self) -> None:
        assert is_compatible(127, Int8)
        assert not is_compatible(128, Int8)


class TestAssignValue:
    def test_compatible_passes_through(self) -> None:
        assert assign_value(5, int) == 5

    def test_mismatch_is_unset(self) -> None:
        assert assign_value("5", int) is UNSET

    def test_convert_parses_strings(self) -> None:
        assert assign_value("1234", int, convert=True) == 1234
        assert assign_value("true", bool, convert=True) is True

    def test_convert_numbers(self) -> None:
        assert assign_value(3, float, convert=True) == 3.0
        assert assign_value(3.9, int, convert=True) == 3
        assert assign_value(7, str, convert=True) == "7"

    def test_convert_range_checked(self) -> None:
        assert assign_value(300, Uint8, convert=True) is UNSET

    def test_convert_failure_is_unset(self) -> None:
        assert assign_value("abc", int, convert=True) is UNSET
        assert assign_value(1, bool, convert=True) is UNSET

    def test_convert_non_scalar_unchanged(self) -> None:
        assert coerce_value({"a": 1}, dict[str, int]) == {"a": 1}
