# topmark:header:start
#
#   project      : CMDA
#   file         : options.py
#   file_relpath : src/cmda/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options shared by CMDA commands.

This module centralizes reusable options (verbosity, configuration and object
source selection) and their resolution logic, so commands can stay thin.
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from cmda.cli.errors import CmdaUsageError
from cmda.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by all commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        CmdaUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set CRITICAL level.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise CmdaUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.CRITICAL
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log critical errors.",
    )(f)
    return f


def common_source_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the configuration file argument and object source overrides.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.argument(
        "config_path",
        metavar="[CONFIG]",
        required=False,
        type=click.Path(dir_okay=False, path_type=str),
    )(f)
    f = click.option(
        "--source-dir",
        "source_dir",
        type=click.Path(file_okay=False, path_type=str),
        default=None,
        help="Directory of object files (overrides [object_source] dir).",
    )(f)
    f = click.option(
        "--pattern",
        "pattern",
        default=None,
        help="Glob pattern selecting object files (overrides [object_source] pattern).",
    )(f)
    return f
