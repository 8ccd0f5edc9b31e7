"""Root CLI group for structconv with global flags and command registration."""

from __future__ import annotations

import click

from structconv import __version__
from structconv.commands import register_commands
from structconv.commands._base import DecodeGroup
from structconv.commands._context import AppContext
from structconv.config.settings import StructconvSettings


@click.group(
    cls=DecodeGroup,
    invoke_without_command=True,
    examples="""\
  structconv env myapp.config:Settings
  structconv query myapp.web:Search 'q=books&page=2'
  cat config.json | structconv --json map myapp.config:Config
  structconv -v form myapp.web:Signup body.txt""",
)
@click.version_option(version=__version__, prog_name="structconv")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """structconv — bind env, query, form, and JSON data into dataclass records."""
    ctx.ensure_object(dict)
    settings = StructconvSettings.from_cli(
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
