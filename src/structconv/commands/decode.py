"""Commands: decode env, query, form, and JSON map sources into a record.

The shared ``--tag-name``, ``--tag-only`` and ``--key-case`` flags are
attached by :class:`DecodeCommand`.
"""

from __future__ import annotations

import json
from typing import IO, TYPE_CHECKING

import click

from structconv.commands._base import DecodeCommand, decode_options

if TYPE_CHECKING:
    from structconv.commands._context import AppContext


@click.command(
    cls=DecodeCommand,
    examples="""\
  structconv env myapp.config:Settings
  structconv --json env myapp.config:Settings --tag-only
  structconv env myapp.config:Settings --key-case identity""",
)
@click.argument("target")
@click.pass_obj
def env(app: AppContext, target: str, tag_name: str, tag_only: bool, key_case: str | None) -> None:
    """Decode environment variables into TARGET ('module:Class')."""
    from structconv.services.env import decode_env

    opts = decode_options(tag_name, tag_only, key_case)
    app.decode(lambda record: decode_env(record, opts), target)


@click.command(
    cls=DecodeCommand,
    examples="""\
  structconv query myapp.web:Search 'q=books&page=2'
  structconv query myapp.web:Search '?q=books' --tag-name form""",
)
@click.argument("target")
@click.argument("query")
@click.pass_obj
def query(
    app: AppContext,
    target: str,
    query: str,
    tag_name: str,
    tag_only: bool,
    key_case: str | None,
) -> None:
    """Decode a URL QUERY string into TARGET ('module:Class')."""
    from structconv.services.urlencoded import decode_query_params

    opts = decode_options(tag_name, tag_only, key_case)
    app.decode(lambda record: decode_query_params(query, record, opts), target)


@click.command(
    cls=DecodeCommand,
    examples="""\
  structconv form myapp.web:Signup body.txt
  printf 'email=a@b.c&age=30' | structconv form myapp.web:Signup""",
)
@click.argument("target")
@click.argument("body", type=click.File("r"), default="-")
@click.pass_obj
def form(
    app: AppContext,
    target: str,
    body: IO[str],
    tag_name: str,
    tag_only: bool,
    key_case: str | None,
) -> None:
    """Decode a URL-encoded form BODY (file or stdin) into TARGET."""
    from structconv.services.urlencoded import decode_form

    data = body.read().strip()
    opts = decode_options(tag_name, tag_only, key_case)
    app.decode(lambda record: decode_form(data, record, opts), target)


@click.command(
    "map",
    cls=DecodeCommand,
    examples="""\
  structconv map myapp.config:Config config.json
  cat config.json | structconv --json map myapp.config:Config""",
)
@click.argument("target")
@click.argument("source", type=click.File("r"), default="-")
@click.pass_obj
def map_cmd(
    app: AppContext,
    target: str,
    source: IO[str],
    tag_name: str,
    tag_only: bool,
    key_case: str | None,
) -> None:
    """Decode a JSON object SOURCE (file or stdin) into TARGET."""
    from structconv.services.decode import decode_map

    try:
        data = json.load(source)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"invalid JSON: {exc}", param_hint="SOURCE") from exc
    if not isinstance(data, dict):
        raise click.BadParameter("top-level JSON value must be an object", param_hint="SOURCE")
    opts = decode_options(tag_name, tag_only, key_case)
    app.decode(lambda record: decode_map(data, record, opts), target)
