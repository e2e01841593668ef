"""Satisfies command implementation for pacver.

Evaluates a single version requirement against one or more candidate
versions and reports the outcome for each.

Typical usage::

    $ pacver satisfies '>=1.2-1' 1.3-1 1.1-4
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import click

from pacver.exceptions import VersionError
from pacver.models import Version, VersionRequirement
from pacver.context import pass_context, PacverContext
from pacver.utils import get_logger, print_error, print_success, print_table

logger = get_logger("commands.satisfies")


@click.command()
@click.argument("requirement")
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Print nothing; report through the exit status only.",
)
@pass_context
def satisfies(
    ctx: PacverContext,
    requirement: str,
    versions: Tuple[str, ...],
    quiet: bool,
) -> None:
    """Check VERSIONS against REQUIREMENT (e.g. '>=1.2-1').

    Exits with status 0 if every version satisfies the requirement and 1
    otherwise, including when any input is invalid.
    """
    parse = ctx.config.version_parser()
    try:
        req = VersionRequirement.parse(requirement)
        candidates = [parse(text) for text in versions]
    except VersionError as exc:
        print_error(str(exc))
        click.get_current_context().exit(1)

    rows = _evaluate(req, candidates)
    all_satisfied = all(row["Satisfied"] == "yes" for row in rows)
    logger.info(
        "%d of %d version(s) satisfy %s",
        sum(row["Satisfied"] == "yes" for row in rows),
        len(rows),
        req,
    )

    if not quiet:
        print_table(
            rows,
            headers=["Version", "Satisfied"],
            title=f"Requirement {req}",
            column_styles={
                "Version": {"style": "cyan"},
                "Satisfied": {"justify": "center"},
            },
        )
        if all_satisfied:
            print_success(f"All {len(rows)} version(s) satisfy {req}")

    if not all_satisfied:
        click.get_current_context().exit(1)


def _evaluate(
    requirement: VersionRequirement,
    candidates: List[Version],
) -> List[Dict[str, Any]]:
    """Build one table row per candidate."""
    return [
        {
            "Version": str(candidate),
            "Satisfied": "yes" if requirement.is_satisfied_by(candidate) else "no",
        }
        for candidate in candidates
    ]
