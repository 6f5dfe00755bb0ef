# topmark:header:start
#
#   project      : CMDA
#   file         : version.py
#   file_relpath : src/cmda/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CMDA `version` command."""

from __future__ import annotations

import click

from cmda.constants import CMDA_VERSION


@click.command(
    name="version",
    help="Show the current version of CMDA.",
)
def version_command() -> None:
    """Print the CMDA version as installed in the current Python environment."""
    click.echo(CMDA_VERSION)
