# topmark:header:start
#
#   project      : CMDA
#   file         : errors.py
#   file_relpath : src/cmda/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for CMDA CLI.

Usage:
    Commands call `translate_error()` on engine exceptions (`cmda.core.errors`)
    and raise the returned Click exception, which prints a styled message and
    exits with the matching `ExitCode`.
"""

from __future__ import annotations

from typing import IO, Any

import click

from cmda.core.errors import (
    ClassificationError,
    CmdaError,
    ConfigurationError,
    ObjectLoadError,
    OutputError,
    PreconditionError,
)
from cmda.core.exit_codes import ExitCode


class CmdaCliError(click.ClickException):
    """Base class for all CMDA CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error in bright red on stderr."""
        click.echo(click.style(f"Error: {self.format_message()}", fg="bright_red"), err=True)


class CmdaUsageError(CmdaCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class CmdaConfigError(CmdaCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class CmdaPreconditionError(CmdaCliError):
    """Error when the output directory is not usable."""

    exit_code = ExitCode.PRECONDITION_FAILED


class CmdaClassificationError(CmdaCliError):
    """Error when an object cannot be loaded or classified."""

    exit_code = ExitCode.CLASSIFICATION_ERROR


class CmdaIOError(CmdaCliError):
    """Error for I/O errors writing artifacts."""

    exit_code = ExitCode.IO_ERROR


class CmdaUnexpectedError(CmdaCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


def translate_error(exc: BaseException) -> CmdaCliError:
    """Map an engine exception to the CLI error carrying its exit code.

    Args:
        exc (BaseException): The exception raised by the engine layer.

    Returns:
        CmdaCliError: The Click exception to raise.
    """
    message: str = str(exc) or type(exc).__name__
    if isinstance(exc, ConfigurationError):
        return CmdaConfigError(message)
    if isinstance(exc, PreconditionError):
        return CmdaPreconditionError(message)
    if isinstance(exc, (ClassificationError, ObjectLoadError)):
        return CmdaClassificationError(message)
    if isinstance(exc, OutputError):
        return CmdaIOError(message)
    if isinstance(exc, CmdaError):
        return CmdaCliError(message)
    return CmdaUnexpectedError(f"Analysis failed: {message}")
