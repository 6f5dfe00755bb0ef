# topmark:header:start
#
#   project      : CMDA
#   file         : errors.py
#   file_relpath : src/cmda/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exception hierarchy for CMDA.

These exceptions are raised by the engine layer and carry no presentation
logic. The CLI layer translates them into Click exceptions with the
appropriate exit code (see `cmda.cli.errors`).

Taxonomy:
    - `ConfigurationError`: required settings missing or unusable, or the
      output directory cannot be created.
    - `PreconditionError`: the output location already holds content or is not
      a directory.
    - `ObjectLoadError`: the object source could not produce a record.
    - `ClassificationError`: the classifier failed on a record.
    - `OutputError`: writing a membership list or a content model failed.

Cleanup failures (closing a membership list) are never raised; they are logged.
"""

from __future__ import annotations


class CmdaError(Exception):
    """Base class for all CMDA errors."""


class ConfigurationError(CmdaError):
    """Configuration is missing, malformed, or names an unusable component."""


class PreconditionError(CmdaError):
    """The output location is not usable for a fresh run."""


class ObjectLoadError(CmdaError):
    """An input object could not be read or is malformed."""


class ClassificationError(CmdaError):
    """The classifier failed for a given object.

    Attributes:
        pid (str): Identifier of the object being classified.
    """

    def __init__(self, message: str, *, pid: str) -> None:
        super().__init__(message)
        self.pid: str = pid


class OutputError(CmdaError):
    """A membership list or content model could not be written."""
