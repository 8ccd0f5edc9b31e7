"""DecodeResult — the contract between decode runs and their presenters.

The CLI renders DecodeResult for humans (Rich output) or machines
(--json). Library callers use the entry points directly and never see it.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field

from structconv.domain.errors import DecodeError, DecodeReport


class DecodeResult(BaseModel):
    """Outcome of decoding into one target record.

    Attributes:
        ok: Whether every field decoded.
        target: Qualified name of the record type.
        data: The record's field values on success.
        error: The aggregate report if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    target: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: DecodeReport | None = None


def run_decode(decode: Callable[[Any], None], target: Any) -> DecodeResult:
    """Run *decode* against *target*, folding a DecodeError into the result.

    Contract violations propagate.
    """
    name = type(target).__qualname__
    try:
        decode(target)
    except DecodeError as exc:
        return DecodeResult(ok=False, target=name, error=exc.report())
    return DecodeResult(ok=True, target=name, data=dataclasses.asdict(target))
