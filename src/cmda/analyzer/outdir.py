# topmark:header:start
#
#   project      : CMDA
#   file         : outdir.py
#   file_relpath : src/cmda/analyzer/outdir.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output directory precondition check."""

from __future__ import annotations

from pathlib import Path

from cmda.config.logging import CmdaLogger, get_logger
from cmda.core.errors import ConfigurationError, PreconditionError

logger: CmdaLogger = get_logger(__name__)


def prepare_output_dir(path: str | Path) -> Path:
    """Ensure ``path`` is an existing, empty directory.

    The directory (and any missing parents) is created when absent. An
    existing directory must be empty so that artifacts of unrelated runs are
    never mixed.

    Args:
        path (str | Path): Target output directory.

    Returns:
        Path: The validated directory path.

    Raises:
        ConfigurationError: If the directory cannot be created.
        PreconditionError: If the path exists but is not a directory, or is
            a non-empty directory.
    """
    out = Path(path)
    if not out.exists():
        try:
            out.mkdir(parents=True)
        except OSError as e:
            raise ConfigurationError(f"Unable to create output directory {out}: {e}") from e
        logger.debug("Created output directory %s", out)
        return out

    if not out.is_dir():
        raise PreconditionError(f"Output path is not a directory: {out}")
    if any(out.iterdir()):
        raise PreconditionError(f"Output directory is not empty: {out}")
    return out
