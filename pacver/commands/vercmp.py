"""Vercmp command implementation for pacver.

Prints ``-1``, ``0`` or ``1`` depending on whether the first version is
older than, equal to, or newer than the second, matching the output of
the classic ``vercmp`` tool.

Typical usage::

    $ pacver vercmp 1:1.0-1 2.0-1
    1
"""

from __future__ import annotations

import click

from pacver.exceptions import VersionError
from pacver.context import pass_context, PacverContext
from pacver.utils import get_logger, print_error

logger = get_logger("commands.vercmp")


@click.command()
@click.argument("first")
@click.argument("second")
@pass_context
def vercmp(ctx: PacverContext, first: str, second: str) -> None:
    """Compare two package versions.

    Exits with status 1 if either version is invalid.
    """
    parse = ctx.config.version_parser()
    try:
        left = parse(first)
        right = parse(second)
    except VersionError as exc:
        print_error(str(exc))
        click.get_current_context().exit(1)

    result = left.compare(right)
    logger.debug("vercmp %s %s -> %d", left, right, result)
    click.echo(str(result))
