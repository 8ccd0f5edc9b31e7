"""Click base classes for decode commands.

DecodeCommand appends the flags every decode command shares
(``--tag-name``, ``--tag-only``, ``--key-case``) and, when given an
``examples`` text, an eager ``--examples`` flag that prints it and exits.
DecodeGroup makes DecodeCommand the default for its subcommands.
"""

from __future__ import annotations

from typing import Any

import click

from structconv.domain.casing import KEY_CONVERTERS
from structconv.domain.options import DecodeOptions


def _examples_option(examples: str) -> click.Option:
    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n")
            click.echo(examples)
            ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples.",
    )


def _decode_params() -> list[click.Parameter]:
    return [
        click.Option(
            ["--tag-name"],
            default="",
            help="Tag namespace to read (defaults per source).",
        ),
        click.Option(
            ["--tag-only"],
            is_flag=True,
            help="Only bind tagged fields and nested records.",
        ),
        click.Option(
            ["--key-case"],
            type=click.Choice(sorted(KEY_CONVERTERS)),
            default=None,
            help="Default key casing for untagged fields.",
        ),
    ]


def decode_options(tag_name: str, tag_only: bool, key_case: str | None) -> DecodeOptions:
    """Build DecodeOptions from the shared flag values."""
    return DecodeOptions(
        tag_name=tag_name,
        tag_only=tag_only,
        key_converter=KEY_CONVERTERS[key_case] if key_case else None,
    )


class DecodeCommand(click.Command):
    """A command decoding one source into a TARGET record."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.params.extend(_decode_params())
        if examples:
            self.params.append(_examples_option(examples))


class DecodeGroup(click.Group):
    """Root group; subcommands default to :class:`DecodeCommand`."""

    command_class = DecodeCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))
