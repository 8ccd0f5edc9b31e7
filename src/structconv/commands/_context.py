"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides target loading and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import importlib
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import click

from structconv.domain.errors import DecodeContractError
from structconv.domain.shapes import is_record_type, new_record
from structconv.output.formatters import format_result
from structconv.services.result import run_decode

if TYPE_CHECKING:
    from structconv.config.settings import StructconvSettings
    from structconv.services.result import DecodeResult


def load_target(spec: str) -> Any:
    """Import ``module:Qualified.Name`` and allocate a zero-valued record.

    Raises:
        click.BadParameter: The spec is malformed, missing, or not a dataclass.
    """
    module_name, sep, qualname = spec.partition(":")
    if not sep or not module_name or not qualname:
        raise click.BadParameter(f"expected 'module:Class', got {spec!r}", param_hint="TARGET")
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise click.BadParameter(f"cannot import {module_name}: {exc}", param_hint="TARGET") from exc
    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            msg = f"{module_name} has no attribute {qualname}"
            raise click.BadParameter(msg, param_hint="TARGET") from exc
    if not is_record_type(obj):
        raise click.BadParameter(f"{spec} is not a dataclass", param_hint="TARGET")
    try:
        return new_record(obj)
    except DecodeContractError as exc:
        raise click.BadParameter(str(exc), param_hint="TARGET") from exc


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: StructconvSettings) -> None:
        self.settings = settings

        # Configure structured logging
        from structconv.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def decode(self, decode: Callable[[Any], None], target_spec: str) -> None:
        """Load the target, run *decode* on it, and emit the result."""
        target = load_target(target_spec)
        try:
            result = run_decode(decode, target)
        except DecodeContractError as exc:
            raise click.ClickException(str(exc)) from exc
        self.emit(result)

    def emit(self, result: DecodeResult) -> None:
        """Format and output a DecodeResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(
            result,
            json_output=self.settings.json_output,
            verbose=self.settings.verbose,
        )
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
