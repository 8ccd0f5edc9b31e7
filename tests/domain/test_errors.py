"""Tests for FieldError, DecodeError, and the serialized report."""

from __future__ import annotations

import json

import pytest

from structconv.domain.errors import DecodeContractError, DecodeError, FieldError


class TestDecodeError:
    def test_requires_errors(self) -> None:
        with pytest.raises(ValueError):
            DecodeError([])

    def test_default_message(self) -> None:
        err = DecodeError([FieldError(name="map[A]", messages=["A is required"])])
        assert err.message == "decoding failed"

    def test_str_is_json_report(self) -> None:
        err = DecodeError([FieldError(name="Int", value="x", messages=["x must be int"])])
        text = str(err)
        assert text.startswith("structconv:\n")
        payload = json.loads(text.removeprefix("structconv:\n"))
        assert payload["message"] == "decoding failed"
        assert payload["errors"] == [{"name": "Int", "value": "x", "messages": ["x must be int"]}]

    def test_report_round_trips_through_json(self) -> None:
        err = DecodeError(
            [
                FieldError(name="a", messages=["m1"]),
                FieldError(name="b", value="v", messages=["m2", "m3"]),
            ],
            message="config invalid",
        )
        parsed = json.loads(err.report().model_dump_json())
        assert parsed["message"] == "config invalid"
        assert [e["name"] for e in parsed["errors"]] == ["a", "b"]

    def test_errors_are_a_copy(self) -> None:
        source = [FieldError(name="a")]
        err = DecodeError(source)
        source.append(FieldError(name="b"))
        assert len(err.errors) == 1


class TestFieldError:
    def test_defaults(self) -> None:
        fe = FieldError(name="x")
        assert fe.value == ""
        assert fe.messages == []

    def test_frozen(self) -> None:
        fe = FieldError(name="x")
        with pytest.raises(Exception):
            fe.name = "y"  # type: ignore[misc]


def test_contract_error_is_type_error() -> None:
    assert issubclass(DecodeContractError, TypeError)
