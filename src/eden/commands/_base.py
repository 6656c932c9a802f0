"""Custom Click base classes with --examples support, plus patch parsing.

EdenCommand and EdenGroup accept an ``examples`` parameter. When
``--examples`` is passed, the command prints usage examples and exits,
keeping ``--help`` concise.
"""

from __future__ import annotations

import json
from typing import Any

import click


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class EdenCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class EdenGroup(click.Group):
    """Click Group whose subcommands default to :class:`EdenCommand`."""

    command_class = EdenCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def parse_patch(raw_json: str | None, assignments: tuple[str, ...]) -> dict[str, Any]:
    """Build a patch map from ``--patch JSON`` and repeated ``--set KEY=VALUE``.

    ``VALUE`` is decoded as JSON when possible (``19.99``, ``2``, ``null``,
    ``'"0800"'``) and kept as a plain string otherwise. ``--set`` entries
    override keys from ``--patch``.
    """
    patch: dict[str, Any] = {}
    if raw_json:
        try:
            decoded = json.loads(raw_json)
        except json.JSONDecodeError as exc:
            raise click.BadParameter(f"Invalid JSON: {exc}", param_hint="--patch") from exc
        if not isinstance(decoded, dict):
            raise click.BadParameter("Must be a JSON object", param_hint="--patch")
        patch.update(decoded)

    for assignment in assignments:
        key, sep, value = assignment.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected KEY=VALUE, got {assignment!r}", param_hint="--set")
        try:
            patch[key] = json.loads(value)
        except json.JSONDecodeError:
            patch[key] = value
    return patch
