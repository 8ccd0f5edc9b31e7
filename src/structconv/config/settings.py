"""CLI settings — flags and environment variables in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click (only flags actually set)
  2. Env vars     — ``STRUCTCONV_*`` prefix
  3. Code defaults

Uses Pydantic Settings v2.
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings


class StructconvSettings(BaseSettings):
    """Settings for the structconv CLI.

    Frozen after construction and stored on the Click context object.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "STRUCTCONV_",
    }

    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> StructconvSettings:
        """Construct settings from a CLI invocation.

        Unset flags (False/None) do not mask environment variables.
        """
        return cls(**{key: value for key, value in cli_flags.items() if value})
