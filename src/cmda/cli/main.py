# topmark:header:start
#
#   project      : CMDA
#   file         : main.py
#   file_relpath : src/cmda/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click CLI entry point for CMDA.

Group-level options (verbosity) configure logging once; subcommands do the
actual work.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from cmda.cli.commands.analyze import analyze_command
from cmda.cli.commands.directives import directives_command
from cmda.cli.commands.version import version_command
from cmda.cli.options import CONTEXT_SETTINGS, common_verbose_options, resolve_verbosity
from cmda.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from cmda.config.logging import CmdaLogger

logger: CmdaLogger = get_logger(__name__)


def init_logging(*, verbose: int, quiet: int) -> int:
    """Configure logging from ``-v``/``-q``; ``CMDA_LOG_LEVEL`` wins over both.

    Args:
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.

    Returns:
        int: The effective logging level.
    """
    level: int = resolve_env_log_level() or resolve_verbosity(verbose, quiet)
    setup_logging(level=level)
    logger.debug("Log level set to %s", logging.getLevelName(level))
    return level


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="CMDA: derive content models from a set of digital objects.",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the CMDA CLI."""
    init_logging(verbose=verbose, quiet=quiet)

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'cmda analyze CONFIG' to classify objects.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(analyze_command)

cli.add_command(directives_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
