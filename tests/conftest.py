"""Shared pytest fixtures and test helpers for structconv tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner

from structconv.domain.errors import DecodeError


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Callable[[dict[str, str]], None]:
    """Replace the process environment for the duration of a test."""
    import os

    for key in list(os.environ):
        monkeypatch.delenv(key, raising=False)

    def apply(values: dict[str, str]) -> None:
        for key, value in values.items():
            monkeypatch.setenv(key, value)

    return apply


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def decode_errors(decode: Callable[..., None], *args: Any, **kwargs: Any) -> DecodeError:
    """Run a decode call that must fail, returning its DecodeError."""
    with pytest.raises(DecodeError) as excinfo:
        decode(*args, **kwargs)
    return excinfo.value


def error_names(err: DecodeError) -> list[str]:
    return [field_error.name for field_error in err.errors]
