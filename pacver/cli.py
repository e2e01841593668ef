"""
Command-line interface for pacver.

This module provides the main CLI entry point and handles global options,
configuration loading, and command registration.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from pacver.config import load_config
from pacver.__version__ import __version__
from pacver.constants import CONFIG_ENV_VAR
from pacver.context import PacverContext
from pacver.exceptions import ConfigError, PacverError
from pacver.utils.console import print_error, print_warning, reconfigure_console
from pacver.utils.logger import get_logger, level_for_verbosity, setup_logging

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar=CONFIG_ENV_VAR,
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="PACVER_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="pacver",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """pacver: compare and constrain Arch Linux package versions.

    \b
    Available commands:
      pacver vercmp A B                Compare two versions (-1, 0, 1)
      pacver satisfies REQ VERSION...  Check versions against a requirement
      pacver sort VERSION...           Sort versions
      pacver upgrade CURRENT TARGET    Classify an upgrade

    \b
    Examples:
      pacver vercmp 1:1.0-1 2.0-1
      pacver satisfies '>=1.2-1' 1.3-1
      pacver -v sort 1.0-2 1.0a-1
    """
    level = level_for_verbosity(verbose)
    setup_logging(level=level, verbose=verbose >= 2)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        ctx.exit(1)

    pacver_ctx = PacverContext()
    pacver_ctx.config_path = config or loaded_config.source_path
    pacver_ctx.color = color
    pacver_ctx.verbose = verbose
    pacver_ctx.config = loaded_config
    ctx.obj = pacver_ctx

    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    logger.debug("pacver v%s", __version__)
    logger.debug("Config path: %s", pacver_ctx.config_path)
    logger.debug("Configuration: %s", loaded_config.to_log_dict())


from pacver.commands.satisfies import satisfies  # noqa: E402
from pacver.commands.sort import sort_command  # noqa: E402
from pacver.commands.upgrade import upgrade  # noqa: E402
from pacver.commands.vercmp import vercmp  # noqa: E402

cli.add_command(vercmp)
cli.add_command(satisfies)
cli.add_command(sort_command)
cli.add_command(upgrade)


def main() -> int:
    """Main entry point for the pacver CLI.

    Returns:
        Exit code:
            0   Success
            1   Invalid input or application error
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        result = cli(standalone_mode=False)
        return result if isinstance(result, int) else 0

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except click.exceptions.Abort:
        print_warning("Operation cancelled by user")
        return 130

    except PacverError as exc:
        print_error(str(exc))
        logger.debug("PacverError details: %s", exc.details or "<none>", exc_info=True)
        return 1

    except KeyboardInterrupt:
        print_warning("Operation cancelled by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
