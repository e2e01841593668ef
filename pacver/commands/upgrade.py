"""Upgrade command implementation for pacver.

Classifies the change from an installed version to a candidate version.

Typical usage::

    $ pacver upgrade 1.0-1 1.0-2
    pkgrel
"""

from __future__ import annotations

import click

from pacver.exceptions import VersionError
from pacver.context import pass_context, PacverContext
from pacver.utils import colorize_update_type, get_logger, print_error
from pacver.utils.console import print_markup
from pacver.utils.version_utils import get_update_type

logger = get_logger("commands.upgrade")


@click.command()
@click.argument("current")
@click.argument("target")
@pass_context
def upgrade(ctx: PacverContext, current: str, target: str) -> None:
    """Classify the change from CURRENT to TARGET.

    Prints one of ``same``, ``downgrade``, ``epoch``, ``pkgver`` or
    ``pkgrel``. Exits with status 0 only when TARGET is an upgrade.
    """
    parse = ctx.config.version_parser()
    try:
        parse(current)
        parse(target)
    except VersionError as exc:
        print_error(str(exc))
        click.get_current_context().exit(1)

    update_type = get_update_type(current, target)
    logger.debug("upgrade %s -> %s: %s", current, target, update_type)
    print_markup(colorize_update_type(update_type))

    if update_type in ("same", "downgrade"):
        click.get_current_context().exit(1)
