"""Sort command implementation for pacver.

Prints the given versions from oldest to newest (or newest first), one per
line. The default order comes from the ``descending`` configuration option.

Typical usage::

    $ pacver sort 1.0-2 1:0.1-1 1.0a-1
    1.0a-1
    1.0-2
    1:0.1-1
"""

from __future__ import annotations

from typing import Optional, Tuple

import click

from pacver.exceptions import VersionError
from pacver.context import pass_context, PacverContext
from pacver.utils import get_logger, print_error

logger = get_logger("commands.sort")


@click.command(name="sort")
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse/--no-reverse",
    "-r",
    default=None,
    help="Sort newest first. Defaults to the 'descending' config option.",
)
@pass_context
def sort_command(
    ctx: PacverContext,
    versions: Tuple[str, ...],
    reverse: Optional[bool],
) -> None:
    """Sort package VERSIONS by version order."""
    if reverse is None:
        reverse = ctx.config.descending

    parse = ctx.config.version_parser()
    try:
        parsed = [(parse(text), text) for text in versions]
    except VersionError as exc:
        print_error(str(exc))
        click.get_current_context().exit(1)

    parsed.sort(key=lambda item: item[0].sort_key(), reverse=reverse)
    logger.debug("Sorted %d version(s), reverse=%s", len(parsed), reverse)

    for _, text in parsed:
        click.echo(text)
