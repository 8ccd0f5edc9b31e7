"""Rich/JSON output helpers.

The CLI renders DecodeResult for humans (Rich output) or machines
(--json). The formatter layer adapts DecodeResult to the requested
output mode.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING

from structconv.output.renderers import render_result

if TYPE_CHECKING:
    from structconv.services.result import DecodeResult


def format_result(
    result: DecodeResult,
    *,
    json_output: bool = False,
    verbose: bool = False,
) -> str:
    """Format a DecodeResult for display.

    Args:
        result: The decode result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
        verbose: Show every column of the error table.
    """
    if json_output:
        # record data may hold values pydantic cannot serialize
        return _json.dumps(result.model_dump(), indent=2, default=str)
    return render_result(result, verbose=verbose)
