# topmark:header:start
#
#   project      : CMDA
#   file         : cmd_common.py
#   file_relpath : src/cmda/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by CMDA commands (configuration resolution, component wiring)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from cmda.cli.errors import translate_error
from cmda.config.factory import construct
from cmda.config.logging import get_logger
from cmda.config.model import load_config
from cmda.core.errors import CmdaError

if TYPE_CHECKING:
    from cmda.config.logging import CmdaLogger
    from cmda.config.model import AnalyzerConfig

logger: CmdaLogger = get_logger(__name__)


def build_config(
    config_path: str | None,
    **overrides: Any,
) -> AnalyzerConfig:
    """Load the configuration file (if given) and apply CLI overrides.

    Args:
        config_path (str | None): Path to a TOML configuration file.
        **overrides (Any): Keyword overrides for `AnalyzerConfig.with_overrides`.

    Returns:
        AnalyzerConfig: The resolved configuration.

    Raises:
        CmdaConfigError: If the configuration cannot be loaded.
    """
    try:
        config: AnalyzerConfig = load_config(Path(config_path) if config_path else None)
    except CmdaError as e:
        raise translate_error(e) from e
    return config.with_overrides(**overrides)


def build_component(kind: str, config: AnalyzerConfig) -> Any:
    """Construct the ``kind`` component named by ``config``, translating errors."""
    try:
        return construct(kind, getattr(config, kind))
    except CmdaError as e:
        raise translate_error(e) from e
